from typing import Callable, List, Tuple

import flet as ft

NAV_ITEMS: List[Tuple[str, str, str]] = [
    ("/", "Home", ft.Icons.HOME),
    ("/subjects", "Subjects", ft.Icons.MENU_BOOK),
    ("/todo", "To-Do List", ft.Icons.CHECKLIST),
    ("/calendar", "Calendar", ft.Icons.CALENDAR_MONTH),
    ("/timer", "Study Timer", ft.Icons.TIMER),
]


def build_app_bar(current_route: str, on_navigate: Callable[[str], None]) -> ft.AppBar:
    actions = []
    for route, label, icon in NAV_ITEMS:
        selected = route == current_route
        actions.append(
            ft.TextButton(
                label,
                icon=icon,
                style=ft.ButtonStyle(color=ft.Colors.INDIGO_900 if selected else ft.Colors.GREY_700),
                on_click=lambda _, r=route: on_navigate(r),
            )
        )

    return ft.AppBar(
        leading=ft.Icon(ft.Icons.SCHOOL, color=ft.Colors.INDIGO_600),
        title=ft.Text("StudyPlanner", weight=ft.FontWeight.BOLD, color=ft.Colors.INDIGO_900),
        bgcolor=ft.Colors.WHITE,
        actions=actions,
    )
