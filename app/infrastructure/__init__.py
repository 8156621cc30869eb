"""Infrastructure modules for the translation application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation dictionaries, resolution engine and locale negotiation
- services: Application-scoped providers and FastAPI dependencies
"""
