"""Renderers turning the md2jira document tree into output text."""

from md2jira.renderers.base import BaseRenderer
from md2jira.renderers.jira import JiraRenderer, ListContext, RenderContext

__all__ = ["BaseRenderer", "JiraRenderer", "ListContext", "RenderContext"]
