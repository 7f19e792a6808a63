"""
Registro de empresas para la feria de empleo
Company Registration Form
"""
import logging

import streamlit as st

from src.config import get_settings
from src.services.catalog_service import load_catalog
from src.services.form_service import RegistrationForm
from src.services.notification_service import StreamlitNotifier
from src.services.registration_store import build_store
from src.ui.registration_form import render_registration_form

logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Registro de empresas",
    page_icon="🏢",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Create the registration form once per browser session."""
    if "registration_form" not in st.session_state:
        settings = get_settings()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        st.session_state.registration_form = RegistrationForm(
            catalog=load_catalog(settings.careers_file),
            store=build_store(settings),
            notifier=StreamlitNotifier(),
            registrant_type=settings.registrant_type,
        )
        logger.info(
            "Registration form initialized (%s backend)",
            "supabase" if settings.uses_supabase else "json",
        )


def main():
    """Application entry point."""
    try:
        initialize_session_state()
        render_registration_form(st.session_state.registration_form)
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("La aplicación encontró un error, recarga la página")

        with st.expander("🔍 Detalles del error"):
            st.code(str(e))

        if st.button("🔄 Reiniciar"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
