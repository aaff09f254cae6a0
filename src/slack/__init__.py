"""Slack transports: incoming webhooks and the Web API."""
