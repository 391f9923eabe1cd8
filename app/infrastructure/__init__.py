"""Infrastructure modules for the Doxy.me Slack Calling application.

Centralized infrastructure components:
- configuration: Settings management (Settings, load_settings)
- logging: Structured logging (get_module_logger, bind_request_context)
- operations: Operation results and error classification
- persistence: Durable JSON document storage with serialized writes
- security: Slack request signature verification
- notifications: Per-recipient direct message delivery
- services: Dependency injection providers (get_settings, SettingsDep)

Subpackages are imported explicitly; this package has no import side effects.
"""
