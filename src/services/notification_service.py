"""Notification collaborators for submission outcomes."""
import logging
from typing import Protocol

import streamlit as st

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Fire-and-forget user notifications."""

    def notify_success(self, message: str) -> None:
        ...

    def notify_failure(self, message: str) -> None:
        ...


class StreamlitNotifier:
    """Shows outcomes as Streamlit toasts."""

    def notify_success(self, message: str) -> None:
        st.toast(f"✅ {message}")

    def notify_failure(self, message: str) -> None:
        st.toast(f"❌ {message}")


class LogNotifier:
    """Writes outcomes to the log (headless use)."""

    def notify_success(self, message: str) -> None:
        logger.info(message)

    def notify_failure(self, message: str) -> None:
        logger.warning(message)
