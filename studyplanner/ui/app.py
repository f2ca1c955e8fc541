from __future__ import annotations

import logging

import flet as ft

from studyplanner.state.app_state import AppState
from studyplanner.ui.navigation import NAV_ITEMS, build_app_bar
from studyplanner.ui.views.calendar_view import build_calendar_view
from studyplanner.ui.views.home_view import build_home_view
from studyplanner.ui.views.subjects_view import build_subjects_view
from studyplanner.ui.views.tasks_view import build_tasks_view
from studyplanner.ui.views.timer_view import build_timer_view

logger = logging.getLogger(__name__)

KNOWN_ROUTES = {route for route, _, _ in NAV_ITEMS}


class StudyPlannerApp:
    def __init__(self, page: ft.Page, app_state: AppState | None = None) -> None:
        self.page = page
        self.page.title = "StudyPlanner"
        self.page.bgcolor = ft.Colors.INDIGO_50
        self.state = app_state or AppState()

    def run(self) -> None:
        self.page.on_route_change = self.handle_route_change
        self.page.on_view_pop = self.handle_view_pop
        self.page.go(self.page.route or "/")

    def navigate(self, route: str) -> None:
        self.page.go(route)

    def build_view(self, route: str) -> ft.View:
        app_bar = build_app_bar(route, self.navigate)
        if route == "/subjects":
            return build_subjects_view(self.page, self.state, app_bar)
        if route == "/todo":
            return build_tasks_view(self.page, self.state, app_bar)
        if route == "/calendar":
            return build_calendar_view(self.page, self.state, app_bar)
        if route == "/timer":
            return build_timer_view(self.page, self.state, app_bar)
        return build_home_view(self.page, app_bar, self.navigate)

    def handle_route_change(self, _: ft.RouteChangeEvent) -> None:
        route = self.page.route if self.page.route in KNOWN_ROUTES else "/"
        # Leaving the timer page cancels its countdown.
        self.state.stop_ticker()
        self.state.route = route
        logger.debug("Navigating to %s", route)
        self.page.views.clear()
        self.page.views.append(self.build_view(route))
        self.page.update()

    def handle_view_pop(self, _: ft.ViewPopEvent) -> None:
        self.page.go("/")


def main(page: ft.Page) -> None:
    StudyPlannerApp(page).run()
