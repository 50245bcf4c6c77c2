# Order cart service
