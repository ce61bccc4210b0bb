import functools
import logging

import gradio as gr
from pydantic import ValidationError

from app.models.measurement import (
    HEIGHT_UNITS,
    WEIGHT_UNITS,
    Height,
    HeightUnit,
    Weight,
    WeightUnit,
)
from app.services.bmi_calculator import calculate_bmi

logger = logging.getLogger(__name__)


def handle_ui_errors(func):
    """Decorator to log unexpected errors raised by UI event handlers."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper


def filter_numeric_input(text: str) -> str:
    """Keep digits and the first decimal point, dropping everything else."""
    if not text:
        return ""
    filtered = []
    seen_point = False
    for char in text:
        if char.isdecimal():
            filtered.append(char)
        elif char == "." and not seen_point:
            filtered.append(char)
            seen_point = True
    return "".join(filtered)


def parse_measurement(text: str) -> float:
    """Parse a measurement text box, treating empty or invalid input as 0.0."""
    try:
        return float(filter_numeric_input(text))
    except ValueError:
        return 0.0


def compute_bmi_from_inputs(
    height_text: str, height_unit: str, weight_text: str, weight_unit: str
) -> str:
    """Compute the BMI string for the raw values of the calculator form.

    Args:
        height_text: Contents of the height text box
        height_unit: Selected height unit ("cm" or "in")
        weight_text: Contents of the weight text box
        weight_unit: Selected weight unit ("kg" or "lbs")

    Returns:
        The formatted BMI, as returned by calculate_bmi
    """
    try:
        height_cm = Height(value=parse_measurement(height_text), unit=height_unit).to_cm()
    except ValidationError:
        logger.warning(f"Unknown height unit {height_unit!r}, using 0.0")
        height_cm = 0.0

    try:
        weight_kg = Weight(value=parse_measurement(weight_text), unit=weight_unit).to_kg()
    except ValidationError:
        logger.warning(f"Unknown weight unit {weight_unit!r}, using 0.0")
        weight_kg = 0.0

    return calculate_bmi(height_cm, weight_kg)


def format_result(bmi: str) -> str:
    """Format the BMI for the result line."""
    if not bmi:
        return ""
    return f"BMI: {bmi}"


@handle_ui_errors
def handle_calculate(height_text, height_unit, weight_text, weight_unit):
    bmi = compute_bmi_from_inputs(height_text, height_unit, weight_text, weight_unit)
    logger.debug(f"Calculated BMI: {bmi}")
    result = format_result(bmi)
    return gr.update(value=result, visible=bool(result))


@handle_ui_errors
def handle_clear():
    """Clear both inputs and hide the result. Unit selections are kept."""
    return "", "", gr.update(value="", visible=False)


def calculator_view():
    with gr.Column():
        gr.Markdown("## Calculate BMI")

        with gr.Row():
            height_input = gr.Textbox(
                label="Height", placeholder="Enter your height", scale=3
            )
            height_unit = gr.Dropdown(
                choices=HEIGHT_UNITS,
                value=HeightUnit.CM.value,
                show_label=False,
                interactive=True,
                scale=1,
                min_width=100,
            )

        with gr.Row():
            weight_input = gr.Textbox(
                label="Weight", placeholder="Enter your weight", scale=3
            )
            weight_unit = gr.Dropdown(
                choices=WEIGHT_UNITS,
                value=WeightUnit.KG.value,
                show_label=False,
                interactive=True,
                scale=1,
                min_width=100,
            )

        with gr.Row():
            calculate_button = gr.Button("Calculate", variant="primary", scale=2)
            clear_button = gr.Button("Clear", variant="secondary", scale=1)

        result = gr.Markdown(visible=False, elem_classes="bmi-result")

        # Filter as the user types; .input does not fire on programmatic updates
        height_input.input(
            fn=filter_numeric_input, inputs=height_input, outputs=height_input
        )
        weight_input.input(
            fn=filter_numeric_input, inputs=weight_input, outputs=weight_input
        )

        calculate_button.click(
            fn=handle_calculate,
            inputs=[height_input, height_unit, weight_input, weight_unit],
            outputs=result,
        )
        clear_button.click(
            fn=handle_clear, outputs=[height_input, weight_input, result]
        )

        return (
            height_input,
            height_unit,
            weight_input,
            weight_unit,
            calculate_button,
            clear_button,
            result,
        )
