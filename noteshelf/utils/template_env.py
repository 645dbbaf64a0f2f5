"""Shared Jinja2 environment for the HTML views."""

from typing import Optional

from fastapi.templating import Jinja2Templates

from .. import config as app_config

_templates: Optional[Jinja2Templates] = None


def get_templates() -> Jinja2Templates:
    """Return the shared templates, created on first use with site globals."""
    global _templates
    if _templates is None:
        _templates = Jinja2Templates(directory=app_config.TEMPLATE_DIR)
        _templates.env.globals.update(
            config=app_config,
            APP_NAME=app_config.NAME,
            CONTENT_URL_PATH=app_config.CONTENT_URL_PATH,
        )
    return _templates
