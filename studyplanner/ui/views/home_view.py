from typing import Callable
import flet as ft

from studyplanner.domain.logic.quotes import random_quote
from studyplanner.ui.navigation import NAV_ITEMS


QUICK_ACTIONS = {
    "/subjects": ("View and manage your subjects and grades", ft.Colors.BLUE_500),
    "/todo": ("Add and track your academic tasks", ft.Colors.GREEN_500),
    "/calendar": ("See your deadlines and events", ft.Colors.PURPLE_500),
    "/timer": ("Focus with the Pomodoro technique", ft.Colors.ORANGE_500),
}


def build_home_view(page: ft.Page, app_bar: ft.AppBar, on_navigate: Callable[[str], None]) -> ft.View:
    quote = ft.Text(random_quote(), size=18, italic=True, color=ft.Colors.WHITE, text_align=ft.TextAlign.CENTER)

    def on_new_quote(_):
        quote.value = random_quote()
        page.update()

    cards = []
    for route, label, icon in NAV_ITEMS:
        if route not in QUICK_ACTIONS:
            continue
        description, color = QUICK_ACTIONS[route]
        cards.append(
            ft.Card(
                content=ft.Container(
                    width=240,
                    padding=16,
                    on_click=lambda _, r=route: on_navigate(r),
                    content=ft.Column(
                        controls=[
                            ft.Container(
                                content=ft.Icon(icon, color=ft.Colors.WHITE),
                                bgcolor=color,
                                padding=10,
                                border_radius=8,
                            ),
                            ft.Text(label, size=18, weight=ft.FontWeight.BOLD),
                            ft.Text(description, color=ft.Colors.GREY_700),
                        ]
                    ),
                )
            )
        )

    return ft.View(
        route="/",
        controls=[
            app_bar,
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    controls=[
                        ft.Text("Welcome to Your Academic Journey", size=32, weight=ft.FontWeight.BOLD),
                        ft.Text(
                            "Stay organized, focused, and motivated with your personal study companion",
                            size=16,
                            color=ft.Colors.GREY_700,
                        ),
                        ft.Container(
                            bgcolor=ft.Colors.INDIGO_500,
                            border_radius=12,
                            padding=24,
                            content=ft.Column(
                                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                                controls=[
                                    quote,
                                    ft.OutlinedButton("New Quote", icon=ft.Icons.REFRESH, on_click=on_new_quote),
                                ],
                            ),
                        ),
                        ft.Row(controls=cards, wrap=True, alignment=ft.MainAxisAlignment.CENTER),
                    ],
                ),
            ),
        ],
    )
