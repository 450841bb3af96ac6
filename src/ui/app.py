"""Streamlit web application for blog post generation."""

import streamlit as st
import streamlit.components.v1 as components

from src.ui.api_client import APIClient
from src.ui.controller import BlogPageController
from src.ui.state import GenerationState, PagePhase
from src.ui.utils import TONE_OPTIONS, clipboard_script, print_script

# Page configuration
st.set_page_config(
    page_title="AI Blog Generator",
    page_icon="✍️",
    layout="centered",
)

# Initialize API client
api_client = APIClient()


def init_session_state():
    """Initialize session state variables."""
    if "controller" not in st.session_state:
        st.session_state.controller = BlogPageController(client=api_client)


def get_controller() -> BlogPageController:
    return st.session_state.controller


def render_sidebar():
    """Render sidebar with API status."""
    with st.sidebar:
        st.subheader("API status")
        if api_client.health_check():
            st.success("✅ API connected")
        else:
            st.error("❌ API unreachable")
            st.caption("Start the API server first")

        st.divider()
        st.caption("AI Blog Generator v0.1.0")


def render_form():
    """Render the topic input, tone buttons and submit button."""
    controller = get_controller()
    state = controller.state
    busy = controller.is_pending or state.is_generating

    topic = st.text_input(
        "What would you like to write about?",
        value=state.topic,
        placeholder="Enter blog topic (e.g., 'The Future of Renewable Energy')",
        disabled=busy,
    )
    if not busy:
        state.topic = topic

    st.markdown("**Select writing style**")
    columns = st.columns(3)
    for i, option in enumerate(TONE_OPTIONS):
        with columns[i % 3]:
            selected = state.tone == option.value
            if st.button(
                f"{option.emoji} {option.label}",
                key=f"tone-{option.value}",
                type="primary" if selected else "secondary",
                disabled=busy,
                use_container_width=True,
            ):
                controller.select_tone(option.value)
                st.rerun()

    label = "Crafting Your Masterpiece..." if busy else "⚡ Generate Blog Post"
    if st.button(label, type="primary", disabled=busy or not state.can_submit, use_container_width=True):
        # Rerun so every control renders disabled before waiting
        controller.start()
        st.rerun()


def wait_for_blog():
    """Show alternating loading copy until the pending request settles.

    A rerun during the wait leaves the request pending, and the next run
    calls this again to pick it up.
    """
    controller = get_controller()
    indicator = st.empty()

    def on_tick(state: GenerationState) -> None:
        indicator.info(f"✍️ {state.loading_copy}")

    on_tick(controller.state)
    controller.wait(on_tick=on_tick)
    indicator.empty()
    st.rerun()


def render_error():
    """Render the dismissable error message."""
    state = get_controller().state
    if not state.error_message:
        return

    col1, col2 = st.columns([12, 1])
    with col1:
        st.error(f"❌ {state.error_message}")
    with col2:
        if st.button("✕", key="dismiss-error", help="Dismiss"):
            state.dismiss_error()
            st.rerun()


def render_output():
    """Render the generated blog with Copy and Print actions."""
    state = get_controller().state
    if state.phase != PagePhase.SUCCESS or not state.blog:
        return

    st.header("Your Generated Blog")

    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        if st.button("📋 Copy", help="Copy to clipboard"):
            components.html(clipboard_script(state.blog), height=0)
            st.toast("Copied to clipboard")
    with col2:
        if st.button("🖨️ Print", help="Print"):
            components.html(print_script(), height=0)

    # Plain text, shown as-is
    st.text(state.blog)


def main():
    """Main application entry point."""
    init_session_state()

    st.title("✍️ AI Blog Generator")
    st.caption("Create stunning, ready-to-publish blog posts in seconds")

    render_sidebar()
    render_form()
    if get_controller().is_pending:
        wait_for_blog()
    render_error()
    render_output()


if __name__ == "__main__":
    main()
