"""
Main Gradio application for the onboarding form.

Walks the user through phone lookup, phone code, email code and a final
dashboard. Only the current step's panel is visible.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import gradio as gr

from onboarding_gateway.api.dependencies import get_onboarding_service
from onboarding_gateway.config import settings
from onboarding_gateway.core.exceptions import OnboardingGatewayError
from onboarding_gateway.core.models import OnboardingSession
from onboarding_gateway.services.onboarding_service import OnboardingService
from onboarding_gateway.ui.utils import (
    StepViewManager,
    format_code_sent,
    format_dashboard,
    format_error
)

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[], OnboardingService]


def run_step(
    action: Callable[..., Tuple[OnboardingSession, Optional[str]]],
    session: OnboardingSession,
    *args: Any
) -> Tuple[OnboardingSession, str]:
    """
    Run one onboarding step and format its error for display.

    Args:
        action: Service operation returning (session, error)
        session: Current session
        *args: User input for the step

    Returns:
        Resulting session and a Markdown error line (empty on success)
    """
    try:
        new_session, error = action(session, *args)
    except OnboardingGatewayError as e:
        logger.warning("Onboarding step failed: %s", e)
        return session, format_error(str(e))

    return new_session, format_error(error)


def _panel_updates(session: OnboardingSession) -> List[Any]:
    return [gr.update(visible=v) for v in StepViewManager.visibility_list(session.step)]


def _load_css() -> Optional[str]:
    css_file = Path(settings.static_dir) / "onboarding.css"
    if css_file.is_file():
        return css_file.read_text(encoding="utf-8")
    return None


def create_gradio_interface(service_factory: ServiceFactory = get_onboarding_service) -> gr.Blocks:
    """
    Create the onboarding interface.

    Args:
        service_factory: Returns the OnboardingService; called per step so
            Twilio credentials are only needed once the form is used

    Returns:
        Gradio Blocks application
    """
    with gr.Blocks(title="Onboarding", theme=gr.themes.Soft(), css=_load_css()) as app:
        gr.Markdown("# Welcome aboard")
        gr.Markdown("Verify your phone number and email address to get started.")

        session_state = gr.State(StepViewManager.new_session())

        # Step 1: phone number
        with gr.Group(visible=True, elem_id="phone-form") as phone_group:
            gr.Markdown("### Your phone number")
            phone_input = gr.Textbox(
                label="Phone",
                placeholder="+14155552671",
                info="Include the country code"
            )
            phone_error = gr.Markdown("", elem_id="phone-error")
            phone_btn = gr.Button("Send code", variant="primary")

        # Step 2: SMS code
        with gr.Group(visible=False, elem_id="phone-otp-form") as phone_otp_group:
            gr.Markdown("### Check your phone")
            phone_otp_prompt = gr.Markdown(format_code_sent(""))
            phone_otp_input = gr.Textbox(label="Code", max_lines=1)
            phone_otp_error = gr.Markdown("", elem_id="phone-otp-error")
            phone_otp_btn = gr.Button("Verify", variant="primary")

        # Step 3: phone verified, offer email verification
        with gr.Group(visible=False, elem_id="phone-verified-dashboard") as phone_verified_group:
            gr.Markdown("### ✅ Phone verified")
            verify_email_btn = gr.Button("Verify your email", variant="primary", elem_id="verify-email-btn")

        # Step 4: email address
        with gr.Group(visible=False, elem_id="email-form") as email_group:
            gr.Markdown("### Your email address")
            email_input = gr.Textbox(label="Email", placeholder="you@example.com")
            email_error = gr.Markdown("", elem_id="email-error")
            email_btn = gr.Button("Send code", variant="primary")

        # Step 5: email code
        with gr.Group(visible=False, elem_id="email-otp-form") as email_otp_group:
            gr.Markdown("### Check your inbox")
            email_otp_prompt = gr.Markdown(format_code_sent(""))
            email_otp_input = gr.Textbox(label="Code", max_lines=1)
            email_otp_error = gr.Markdown("", elem_id="email-otp-error")
            email_otp_btn = gr.Button("Verify", variant="primary")

        # Done
        with gr.Group(visible=False, elem_id="dashboard") as dashboard_group:
            dashboard_display = gr.Markdown("")

        panels = [
            phone_group,
            phone_otp_group,
            phone_verified_group,
            email_group,
            email_otp_group,
            dashboard_group,
        ]

        # Event handlers
        def submit_phone(phone: str, session: OnboardingSession):
            session, error = run_step(
                lambda s, p: service_factory().submit_phone(s, p), session, phone
            )
            return [session, error, format_code_sent(session.phone), *_panel_updates(session)]

        def submit_phone_code(code: str, session: OnboardingSession):
            session, error = run_step(
                lambda s, c: service_factory().submit_phone_code(s, c), session, code
            )
            return [session, error, *_panel_updates(session)]

        def begin_email(session: OnboardingSession):
            session, _ = run_step(
                lambda s: (service_factory().begin_email(s), None), session
            )
            return [session, *_panel_updates(session)]

        def submit_email(email: str, session: OnboardingSession):
            session, error = run_step(
                lambda s, e: service_factory().submit_email(s, e), session, email
            )
            return [session, error, format_code_sent(session.email), *_panel_updates(session)]

        def submit_email_code(code: str, session: OnboardingSession):
            session, error = run_step(
                lambda s, c: service_factory().submit_email_code(s, c), session, code
            )
            summary = format_dashboard(session) if session.is_complete else ""
            return [session, error, summary, *_panel_updates(session)]

        def disable():
            return gr.update(interactive=False)

        def enable():
            return gr.update(interactive=True)

        # Wire up events; buttons stay disabled while Twilio is called
        phone_btn.click(fn=disable, outputs=[phone_btn]).then(
            fn=submit_phone,
            inputs=[phone_input, session_state],
            outputs=[session_state, phone_error, phone_otp_prompt, *panels]
        ).then(fn=enable, outputs=[phone_btn])

        phone_otp_btn.click(fn=disable, outputs=[phone_otp_btn]).then(
            fn=submit_phone_code,
            inputs=[phone_otp_input, session_state],
            outputs=[session_state, phone_otp_error, *panels]
        ).then(fn=enable, outputs=[phone_otp_btn])

        verify_email_btn.click(
            fn=begin_email,
            inputs=[session_state],
            outputs=[session_state, *panels]
        )

        email_btn.click(fn=disable, outputs=[email_btn]).then(
            fn=submit_email,
            inputs=[email_input, session_state],
            outputs=[session_state, email_error, email_otp_prompt, *panels]
        ).then(fn=enable, outputs=[email_btn])

        email_otp_btn.click(fn=disable, outputs=[email_otp_btn]).then(
            fn=submit_email_code,
            inputs=[email_otp_input, session_state],
            outputs=[session_state, email_otp_error, dashboard_display, *panels]
        ).then(fn=enable, outputs=[email_otp_btn])

    return app


# For standalone testing
if __name__ == "__main__":
    app = create_gradio_interface()
    app.launch(server_name=settings.server_host, server_port=7860)
