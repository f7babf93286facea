"""Remote panel endpoints: interfaces and the httpx-based client."""

from kubepanel.api.base import ResourceCreator, TemplateSource
from kubepanel.api.client import PanelApiClient, TemplateFetchError

__all__ = ["PanelApiClient", "ResourceCreator", "TemplateFetchError", "TemplateSource"]
