import flet as ft

from spicalc.state.app_state import AppState
from spicalc.state.calculator_state import CalculatorState


def _grade_options(calculator: CalculatorState) -> list:
    return [ft.dropdown.Option(label, f"{label} (Points: {points})") for label, points in calculator.grade_table]


def build_calculator_view(page: ft.Page, app_state: AppState) -> ft.View:
    calculator = app_state.calculator

    status = ft.Text(color=ft.Colors.RED_400)
    spi_text = ft.Text(size=32, weight=ft.FontWeight.BOLD)
    cpi_text = ft.Text(size=24, weight=ft.FontWeight.BOLD)
    course_rows = ft.Column(spacing=10)

    prior_cpi = ft.TextField(
        label="Previous CPI",
        hint_text="e.g., 8.00",
        width=200,
        keyboard_type=ft.KeyboardType.NUMBER,
        visible=calculator.enable_cpi,
    )
    prior_semesters = ft.TextField(
        label="Previous Semesters",
        hint_text="e.g., 2",
        width=200,
        keyboard_type=ft.KeyboardType.NUMBER,
        visible=calculator.enable_cpi,
    )

    def render_output() -> None:
        status.value = calculator.error or ""
        result = calculator.result
        if result is None:
            spi_text.value = ""
            cpi_text.value = ""
        else:
            spi_text.value = f"Your Semester Performance Index (SPI) is: {result.spi}"
            cpi_text.value = f"Your new Cumulative Performance Index (CPI) is: {result.cpi}" if result.cpi else ""

    def render_rows() -> None:
        course_rows.controls.clear()
        entries = calculator.courses.entries()
        options = _grade_options(calculator)

        for index, entry in enumerate(entries, start=1):

            def make_change_handler(entry_id: str, field_name: str):
                def handler(e: ft.ControlEvent) -> None:
                    calculator.update_course(entry_id, field_name, e.control.value)
                    render_output()
                    page.update()

                return handler

            def make_remove_handler(entry_id: str):
                def handler(_) -> None:
                    calculator.remove_course(entry_id)
                    render_rows()
                    render_output()
                    page.update()

                return handler

            controls = [
                ft.Text(f"{index}.", width=30, weight=ft.FontWeight.BOLD),
                ft.Dropdown(
                    label="Select Grade",
                    width=220,
                    value=entry.grade or None,
                    options=options,
                    on_change=make_change_handler(entry.id, "grade"),
                ),
                ft.TextField(
                    label="Credits",
                    hint_text="Credits (e.g., 3)",
                    width=180,
                    value=entry.credit,
                    keyboard_type=ft.KeyboardType.NUMBER,
                    on_change=make_change_handler(entry.id, "credit"),
                ),
            ]
            if len(entries) > 1:
                controls.append(ft.OutlinedButton("Remove", on_click=make_remove_handler(entry.id)))
            course_rows.controls.append(ft.Row(controls=controls))

    def on_prior_cpi_change(e: ft.ControlEvent) -> None:
        calculator.set_prior_cpi(e.control.value)
        render_output()
        page.update()

    def on_prior_semesters_change(e: ft.ControlEvent) -> None:
        calculator.set_prior_semesters(e.control.value)
        render_output()
        page.update()

    def on_add(_) -> None:
        calculator.add_course()
        render_rows()
        render_output()
        page.update()

    def on_calculate(_) -> None:
        calculator.calculate()
        render_output()
        page.update()

    def on_reset(_) -> None:
        calculator.reset()
        prior_cpi.value = ""
        prior_semesters.value = ""
        render_rows()
        render_output()
        page.update()

    prior_cpi.on_change = on_prior_cpi_change
    prior_semesters.on_change = on_prior_semesters_change

    render_rows()
    render_output()

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text("SPI Calculator")),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("SPI Calculator", size=28, weight=ft.FontWeight.BOLD),
                        status,
                        course_rows,
                        ft.Row(
                            controls=[
                                ft.Button("Add Another Course", on_click=on_add),
                                ft.Button("Calculate SPI", on_click=on_calculate),
                                ft.TextButton("Start Over", on_click=on_reset),
                            ]
                        ),
                        ft.Row(controls=[prior_cpi, prior_semesters], visible=calculator.enable_cpi),
                        ft.Divider(),
                        spi_text,
                        cpi_text,
                    ],
                ),
            ),
        ],
    )
