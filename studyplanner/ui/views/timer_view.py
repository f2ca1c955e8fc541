from datetime import date
import logging
import flet as ft

from studyplanner.domain.logic.timer import (
    LONG_BREAK_CHOICES,
    SHORT_BREAK_CHOICES,
    WORK_DURATION_CHOICES,
    TimerState,
    format_study_time,
)
from studyplanner.domain.models.entities import SessionType
from studyplanner.services.ticker import Ticker
from studyplanner.services.timer_service import TimerService
from studyplanner.services.validation import InputError
from studyplanner.state.app_state import AppState

logger = logging.getLogger(__name__)

STATE_LABELS = {
    TimerState.WORK_PAUSED: ("Focus Time", "Start", ft.Icons.PLAY_ARROW),
    TimerState.WORK_RUNNING: ("Focus Time", "Pause", ft.Icons.PAUSE),
    TimerState.BREAK_PAUSED: ("Break Time", "Start", ft.Icons.PLAY_ARROW),
    TimerState.BREAK_RUNNING: ("Break Time", "Pause", ft.Icons.PAUSE),
}


def _minutes_dropdown(label: str, choices, value: int, on_change) -> ft.Dropdown:
    options = [ft.dropdown.Option(str(c), f"{c} minutes") for c in sorted(set(choices) | {value})]
    return ft.Dropdown(label=label, width=220, value=str(value), options=options, on_change=on_change)


def build_timer_view(page: ft.Page, app_state: AppState, app_bar: ft.AppBar) -> ft.View:
    service = TimerService(app_state.storage)
    timer = service.timer

    phase_title = ft.Text(size=22, weight=ft.FontWeight.BOLD)
    clock = ft.Text(size=72, weight=ft.FontWeight.BOLD, font_family="monospace")
    progress = ft.ProgressBar(width=420, value=0)
    toggle_button = ft.ElevatedButton(width=140)
    status = ft.Text(color=ft.Colors.GREEN_400)
    pomodoros = ft.Text(size=24, weight=ft.FontWeight.BOLD, color=ft.Colors.INDIGO_600)
    study_time = ft.Text(size=24, weight=ft.FontWeight.BOLD, color=ft.Colors.GREEN_600)
    recent = ft.Column(spacing=4)

    def fill_clock() -> None:
        phase_title.value, toggle_button.text, toggle_button.icon = STATE_LABELS[timer.state]
        clock.value = timer.display
        clock.color = ft.Colors.GREEN_600 if timer.is_break else ft.Colors.INDIGO_600
        progress.value = timer.progress / 100

    def fill_stats() -> None:
        today = date.today()
        pomodoros.value = str(service.pomodoros_today(today))
        study_time.value = format_study_time(service.study_minutes_today(today))
        recent.controls.clear()
        if not timer.sessions:
            recent.controls.append(ft.Text("No sessions yet", color=ft.Colors.GREY_600))
        for session in timer.recent_sessions():
            is_work = session.type is SessionType.WORK
            recent.controls.append(
                ft.Row(
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Icon(
                                    ft.Icons.TIMER if is_work else ft.Icons.COFFEE,
                                    size=14,
                                    color=ft.Colors.INDIGO_500 if is_work else ft.Colors.GREEN_500,
                                ),
                                ft.Text(session.type.value.title()),
                            ]
                        ),
                        ft.Text(f"{session.duration}m", color=ft.Colors.GREY_600),
                    ],
                )
            )

    def on_tick() -> None:
        session = service.tick(1)
        if session is not None:
            app_state.stop_ticker()
            if session.type is SessionType.WORK:
                status.value = "Work session complete! " + (
                    "Time for a long break!" if timer.long_break else "Time for a short break!"
                )
            else:
                status.value = "Break complete! Time to get back to work!"
            fill_stats()
        fill_clock()
        page.update()

    def on_toggle(_):
        if service.toggle():
            app_state.stop_ticker()
            app_state.ticker = Ticker(on_tick, interval=1.0)
            app_state.ticker.start()
        else:
            app_state.stop_ticker()
        status.value = ""
        fill_clock()
        page.update()

    def on_reset(_):
        app_state.stop_ticker()
        service.reset()
        status.value = ""
        fill_clock()
        page.update()

    def make_setting_handler(field_name: str):
        def handler(e: ft.ControlEvent):
            try:
                service.update_settings(**{field_name: int(e.control.value)})
            except (InputError, ValueError) as exc:
                logger.warning("Timer setting %s not applied: %s", field_name, exc)
                status.value = str(exc)
            fill_clock()
            page.update()

        return handler

    toggle_button.on_click = on_toggle

    work = _minutes_dropdown(
        "Work Duration", WORK_DURATION_CHOICES, service.settings.work_duration, make_setting_handler("work_duration")
    )
    short_break = _minutes_dropdown(
        "Short Break", SHORT_BREAK_CHOICES, service.settings.short_break, make_setting_handler("short_break")
    )
    long_break = _minutes_dropdown(
        "Long Break", LONG_BREAK_CHOICES, service.settings.long_break, make_setting_handler("long_break")
    )

    fill_clock()
    fill_stats()

    return ft.View(
        route="/timer",
        controls=[
            app_bar,
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("Study Timer", size=26, weight=ft.FontWeight.BOLD),
                        ft.Text("Focus with the Pomodoro Technique"),
                        ft.Row(
                            vertical_alignment=ft.CrossAxisAlignment.START,
                            wrap=True,
                            controls=[
                                ft.Card(
                                    content=ft.Container(
                                        padding=24,
                                        content=ft.Column(
                                            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                                            controls=[
                                                phase_title,
                                                clock,
                                                progress,
                                                ft.Row(
                                                    alignment=ft.MainAxisAlignment.CENTER,
                                                    controls=[
                                                        toggle_button,
                                                        ft.OutlinedButton(
                                                            "Reset", icon=ft.Icons.RESTART_ALT, on_click=on_reset
                                                        ),
                                                    ],
                                                ),
                                                status,
                                                ft.Divider(),
                                                ft.Row(
                                                    alignment=ft.MainAxisAlignment.SPACE_AROUND,
                                                    width=420,
                                                    controls=[
                                                        ft.Column([pomodoros, ft.Text("Pomodoros Today")]),
                                                        ft.Column([study_time, ft.Text("Study Time Today")]),
                                                    ],
                                                ),
                                            ],
                                        ),
                                    )
                                ),
                                ft.Column(
                                    width=280,
                                    controls=[
                                        ft.Text("Settings", size=20, weight=ft.FontWeight.BOLD),
                                        work,
                                        short_break,
                                        long_break,
                                        ft.Divider(),
                                        ft.Text("Recent Sessions", size=20, weight=ft.FontWeight.BOLD),
                                        recent,
                                    ],
                                ),
                            ],
                        ),
                    ],
                ),
            ),
        ],
    )
