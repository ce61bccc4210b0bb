"""
Theme configuration for the BMI Calculator application.
"""

import gradio as gr

TITLE = "BMI Calculator"


def setup_theme():
    """Setup the application theme and custom CSS."""
    custom_css = """
    /* Single narrow column, like a phone screen */
    .gradio-container {
        max-width: 480px !important;
        margin: 0 auto;
    }

    .bmi-result {
        font-size: 2rem;
        font-weight: 600;
        text-align: center;
        padding: 1rem 0;
    }

    @media (max-width: 768px) {
        .gradio-container {
            padding: 0.5rem;
        }
    }
    """

    return gr.Blocks(title=TITLE, theme=gr.themes.Soft(), css=custom_css)
