"""Slack Integration Package.

This package contains the Slack integration modules. Contains:

- users: User profile lookups.
- commands: Slash command body parsing and user mention extraction.
- blocks: Block Kit builders and validation.
- responses: Slash command response model and delivery of deferred results
  to a command's response_url.
"""
