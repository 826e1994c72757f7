import flet as ft

from spicalc.config.settings import settings
from spicalc.logging_config import setup_logging
from spicalc.state.app_state import AppState
from spicalc.ui.views.calculator_view import build_calculator_view


def main(page: ft.Page) -> None:
    page.title = "SPI Calculator"
    page.scroll = ft.ScrollMode.AUTO
    # One calculator per page session.
    app_state = AppState()
    page.views.clear()
    page.views.append(build_calculator_view(page, app_state))
    page.update()


def run() -> None:
    setup_logging(settings.log_level)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
