from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from dog_license.config import PAGE_TITLE_PREFIX, Settings, load_settings
from dog_license.infra.logging import LoggerManager


@dataclass(frozen=True)
class PageSpec:
    title: str
    icon: str
    layout: str = "centered"
    sidebar_state: str = "auto"


def init_page(spec: PageSpec) -> Settings:
    """Initialize a Streamlit page in a consistent way and return the settings.

    NOTE: This must be called before any other Streamlit command on a page.
    """
    st.set_page_config(
        page_title=f"{PAGE_TITLE_PREFIX}{spec.title}",
        page_icon=spec.icon,
        layout=spec.layout,
        initial_sidebar_state=spec.sidebar_state,
    )

    settings = load_settings()
    LoggerManager.apply(settings.log_level, settings.log_file if settings.log_to_file else None)
    return settings


__all__ = ["PageSpec", "init_page"]
