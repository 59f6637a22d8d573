"""
Integrations for external services.

This package contains the outbound Slack incoming-webhook integration.
"""
