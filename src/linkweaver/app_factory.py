from linkweaver.adapters.link_template_file_adapter import LinkTemplateFileAdapter
from linkweaver.adapters.link_templates_inmemory import InMemoryLinkTemplates
from linkweaver.core.config import LinkBuilderConfig
from linkweaver.core.interfaces.link_templates import LinkTemplatesPort
from linkweaver.core.logging_config import configure_logging
from linkweaver.core.managers.link_manager import LinkManager
from linkweaver.core.settings import LinkweaverSettings, app_settings, logger


def create_link_manager(settings: LinkweaverSettings = app_settings) -> LinkManager:
    """Composition root: wire logging, link templates and defaults from settings."""
    configure_logging(settings.LINKWEAVER_LOG_LEVEL)
    settings.print_settings(logger)

    templates: LinkTemplatesPort
    if settings.LINKWEAVER_LINK_TEMPLATES_FILE is not None:
        templates = LinkTemplateFileAdapter(settings.LINKWEAVER_LINK_TEMPLATES_FILE)
    else:
        logger.warning("LINKWEAVER_LINK_TEMPLATES_FILE not set, starting without link templates")
        templates = InMemoryLinkTemplates()

    return LinkManager(templates, LinkBuilderConfig.from_app_settings(settings))
