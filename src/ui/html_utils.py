"""Utilities for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Lines with >=4 leading spaces would render as code blocks, so every
    line is dedented and left-stripped.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def field_error_html(message: str) -> str:
    """Inline error shown under a form field; the message is escaped."""
    return html_block(
        f"""
        <div class="field-error" style="color: #ef4444; font-size: 13px; margin: -8px 0 8px 0;">
            {escape(message)}
        </div>
        """
    )
