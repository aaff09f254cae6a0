"""Slack message actions: webhook and Web API delivery."""
