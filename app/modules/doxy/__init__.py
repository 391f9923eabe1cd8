"""Doxy.me calling feature.

Links a Slack user to their Doxy.me room and invites other users to it:

- urls: room URL validation and canonicalization
- models: the persisted user to room mapping
- mappings: repository over the mapping document
- messages: user-facing texts and Block Kit payloads
- commands: the setup and invite slash command handlers
"""
