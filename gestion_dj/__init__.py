"""Business management for DJs: events, clients, finances and accounts."""
