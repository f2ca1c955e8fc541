from datetime import date
import flet as ft

from studyplanner.domain.logic.events import WEEKDAY_HEADERS, month_grid, month_title, shift_month
from studyplanner.domain.models.entities import Event, EventType
from studyplanner.services.events_service import EventsService
from studyplanner.services.validation import InputError
from studyplanner.state.app_state import AppState


EVENT_COLORS = {
    EventType.EXAM: (ft.Colors.RED_100, ft.Colors.RED_800),
    EventType.ASSIGNMENT: (ft.Colors.BLUE_100, ft.Colors.BLUE_800),
    EventType.PROJECT: (ft.Colors.PURPLE_100, ft.Colors.PURPLE_800),
    EventType.CLASS: (ft.Colors.GREEN_100, ft.Colors.GREEN_800),
    EventType.OTHER: (ft.Colors.GREY_100, ft.Colors.GREY_800),
}

MAX_EVENTS_PER_CELL = 2


def build_calendar_view(page: ft.Page, app_state: AppState, app_bar: ft.AppBar) -> ft.View:
    service = EventsService(app_state.storage)
    opened = date.today()
    shown = {"year": opened.year, "month": opened.month}

    title = ft.TextField(label="Event title", width=320)
    event_date = ft.TextField(label="Date (YYYY-MM-DD)", width=200)
    event_time = ft.TextField(label="Time (HH:MM)", width=160)
    event_type = ft.Dropdown(
        width=200,
        label="Type",
        value=EventType.OTHER.value,
        options=[ft.dropdown.Option(t.value, t.value.title()) for t in EventType],
    )
    description = ft.TextField(label="Description (optional)", width=500)
    status = ft.Text(color=ft.Colors.RED_400)
    month_label = ft.Text(size=20, weight=ft.FontWeight.BOLD)
    grid = ft.Column(spacing=4)
    upcoming_list = ft.Column(spacing=8)

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def chip(event: Event) -> ft.Container:
        bg, fg = EVENT_COLORS[event.type]
        return ft.Container(
            content=ft.Text(event.title, size=10, color=fg, max_lines=1, overflow=ft.TextOverflow.ELLIPSIS),
            bgcolor=bg,
            padding=2,
            border_radius=2,
            tooltip=f"{event.time} {event.title}".strip(),
        )

    def make_day_handler(day_date: date):
        def handler(_):
            event_date.value = day_date.isoformat()
            page.update()

        return handler

    def make_delete_handler(event_id: str):
        def handler(_):
            service.delete_event(event_id)
            set_status("Event removed from the calendar.", is_error=False)
            render()

        return handler

    def fill_grid() -> None:
        year, month = shown["year"], shown["month"]
        today = date.today()
        events_by_day = service.by_day()
        month_label.value = month_title(year, month)
        grid.controls = [
            ft.Row(
                controls=[
                    ft.Container(content=ft.Text(d, weight=ft.FontWeight.BOLD), expand=1, alignment=ft.alignment.center)
                    for d in WEEKDAY_HEADERS
                ]
            )
        ]
        for week in month_grid(year, month):
            cells = []
            for day in week:
                if day == 0:
                    cells.append(ft.Container(expand=1, height=90))
                    continue
                day_date = date(year, month, day)
                day_events = events_by_day.get(day_date, [])
                is_today = day_date == today
                content = [ft.Text(str(day), weight=ft.FontWeight.BOLD if is_today else ft.FontWeight.NORMAL)]
                content.extend(chip(e) for e in day_events[:MAX_EVENTS_PER_CELL])
                if len(day_events) > MAX_EVENTS_PER_CELL:
                    content.append(
                        ft.Text(f"+{len(day_events) - MAX_EVENTS_PER_CELL} more", size=10, color=ft.Colors.GREY)
                    )
                cells.append(
                    ft.Container(
                        content=ft.Column(controls=content, spacing=2),
                        expand=1,
                        height=90,
                        padding=4,
                        border=ft.border.all(1, ft.Colors.INDIGO_300 if is_today else ft.Colors.OUTLINE_VARIANT),
                        bgcolor=ft.Colors.INDIGO_50 if is_today else None,
                        on_click=make_day_handler(day_date),
                    )
                )
            grid.controls.append(ft.Row(controls=cells, spacing=4))

    def fill_upcoming() -> None:
        upcoming_list.controls.clear()
        events = service.upcoming(date.today())
        if not events:
            upcoming_list.controls.append(ft.Text("No upcoming events"))
        for event in events:
            bg, fg = EVENT_COLORS[event.type]
            when = event.date.strftime("%a, %b %d")
            if event.time:
                when = f"{when} at {event.time}"
            upcoming_list.controls.append(
                ft.Card(
                    content=ft.Container(
                        padding=10,
                        content=ft.Row(
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                            controls=[
                                ft.Column(
                                    expand=True,
                                    controls=[
                                        ft.Text(event.title, weight=ft.FontWeight.BOLD),
                                        ft.Text(when, size=12, color=ft.Colors.GREY_700),
                                        ft.Container(
                                            content=ft.Text(event.type.value, size=12, color=fg),
                                            bgcolor=bg,
                                            padding=4,
                                            border_radius=8,
                                        ),
                                        ft.Text(event.description, size=12) if event.description else ft.Container(),
                                    ],
                                ),
                                ft.IconButton(
                                    icon=ft.Icons.DELETE_OUTLINE,
                                    icon_color=ft.Colors.RED_400,
                                    on_click=make_delete_handler(event.id),
                                ),
                            ],
                        ),
                    )
                )
            )

    def render() -> None:
        fill_grid()
        fill_upcoming()
        page.update()

    def make_month_handler(step: int):
        def handler(_):
            shown["year"], shown["month"] = shift_month(shown["year"], shown["month"], step)
            render()

        return handler

    def on_add(_):
        try:
            service.add_event(
                title.value,
                event_date.value,
                time=event_time.value,
                event_type=event_type.value,
                description=description.value,
            )
            title.value = ""
            event_date.value = ""
            event_time.value = ""
            event_type.value = EventType.OTHER.value
            description.value = ""
            set_status("Your event has been added to the calendar!", is_error=False)
            render()
        except InputError as exc:
            set_status(str(exc))
            page.update()

    fill_grid()
    fill_upcoming()

    return ft.View(
        route="/calendar",
        controls=[
            app_bar,
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("Academic Calendar", size=26, weight=ft.FontWeight.BOLD),
                        ft.Text("Keep track of exams, assignments, and important dates"),
                        ft.Row(
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                            controls=[
                                month_label,
                                ft.Row(
                                    controls=[
                                        ft.IconButton(icon=ft.Icons.CHEVRON_LEFT, on_click=make_month_handler(-1)),
                                        ft.IconButton(icon=ft.Icons.CHEVRON_RIGHT, on_click=make_month_handler(1)),
                                    ]
                                ),
                            ],
                        ),
                        ft.Container(
                            content=grid,
                            border=ft.border.all(1, ft.Colors.OUTLINE),
                            border_radius=5,
                            padding=10,
                        ),
                        ft.Text("Add Event", size=20, weight=ft.FontWeight.BOLD),
                        ft.Row(controls=[title, event_type]),
                        ft.Row(controls=[event_date, event_time]),
                        description,
                        ft.ElevatedButton("Add Event", icon=ft.Icons.ADD, on_click=on_add),
                        status,
                        ft.Divider(),
                        ft.Text("Upcoming Events", size=20, weight=ft.FontWeight.BOLD),
                        upcoming_list,
                    ],
                ),
            ),
        ],
    )
