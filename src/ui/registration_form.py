"""Company registration form page."""
import asyncio
from typing import Any, Callable, Coroutine, List, Tuple

import streamlit as st

from src.services.attendee_service import MAX_EXTRA_ATTENDEES
from src.services.form_schema import COUNT, EMAIL, TEXT, TRACKS, TRI_STATE
from src.services.form_service import FieldDescriptor, RegistrationForm
from src.ui.html_utils import field_error_html


KEY_PREFIX = "registration"


def _widget_key(generation: int, name: str) -> str:
    """Widget key scoped to the form generation; a reset yields fresh widgets."""
    return f"{KEY_PREFIX}_{generation}_{name.replace('.', '_')}"


def _choice_index(options: List[Tuple[str, str]], value: str) -> int:
    """Index of `value` among option codes, falling back to the first option."""
    codes = [code for code, _ in options]
    return codes.index(value) if value in codes else 0


def _run_async(
    factory: Callable[[], Coroutine[Any, Any, Tuple[bool, str]]]
) -> Tuple[bool, str]:
    """Execute coroutine with a fresh event loop when required."""
    try:
        return asyncio.run(factory())
    except RuntimeError:
        loop = asyncio.new_event_loop()
        try:
            return loop.run_until_complete(factory())
        finally:
            loop.close()


def _sync_widget(key: str, handler: Callable[[Any], Any]) -> None:
    """Push a widget's new value into the form."""
    handler(st.session_state[key])


def _select_track(key: str, form: RegistrationForm) -> None:
    track_id = st.session_state[key]
    if track_id:
        form.add_track(track_id)
    # Callbacks run before widgets render, so the picker can be cleared here
    st.session_state[key] = ""


def _render_error(error: str) -> None:
    if error:
        st.markdown(field_error_html(error), unsafe_allow_html=True)


def _render_tracks(descriptor: FieldDescriptor, form: RegistrationForm, key: str) -> None:
    labels = dict(descriptor.options)
    st.selectbox(
        descriptor.label,
        options=[""] + [code for code, _ in descriptor.options],
        format_func=lambda code: labels.get(code, descriptor.placeholder),
        key=key,
        on_change=_select_track,
        args=(key, form),
    )

    for track_id, track_name in descriptor.value:
        name_col, action_col = st.columns([4, 1])
        with name_col:
            st.markdown(track_name)
        with action_col:
            st.button(
                "Eliminar",
                key=f"{key}_remove_{track_id}",
                on_click=form.remove_track,
                args=(track_id,),
                use_container_width=True,
            )


def _render_field(descriptor: FieldDescriptor, form: RegistrationForm) -> None:
    key = _widget_key(form.generation, descriptor.name)

    if descriptor.kind in (TEXT, EMAIL):
        st.text_input(
            descriptor.label,
            value=descriptor.value,
            placeholder=descriptor.placeholder,
            key=key,
            on_change=_sync_widget,
            args=(key, descriptor.on_change),
        )
    elif descriptor.kind == TRI_STATE:
        labels = dict(descriptor.options)
        st.selectbox(
            descriptor.label,
            options=[code for code, _ in descriptor.options],
            index=_choice_index(descriptor.options, descriptor.value),
            format_func=lambda code: labels[code],
            key=key,
            on_change=_sync_widget,
            args=(key, descriptor.on_change),
        )
    elif descriptor.kind == COUNT:
        st.number_input(
            descriptor.label,
            min_value=0,
            max_value=MAX_EXTRA_ATTENDEES,
            step=1,
            value=int(descriptor.value),
            key=key,
            on_change=_sync_widget,
            args=(key, descriptor.on_change),
        )
    elif descriptor.kind == TRACKS:
        _render_tracks(descriptor, form, key)
    else:
        raise ValueError(f"Unsupported field kind: {descriptor.kind}")

    _render_error(descriptor.error)


def render_registration_form(form: RegistrationForm) -> None:
    """Render every active field and the submit button."""
    st.title("Registro de empresas")
    st.caption("Completa los datos de tu empresa para participar en la feria de empleo.")

    for descriptor in form.descriptors():
        _render_field(descriptor, form)

    if st.button(
        form.submit_label,
        key=_widget_key(form.generation, "submit"),
        disabled=form.is_busy,
        type="primary",
        use_container_width=True,
    ):
        success, message = _run_async(form.submit)
        if success:
            st.success(f"✅ {message}")
            st.balloons()
            st.rerun()
        else:
            st.error(f"❌ {message}")
