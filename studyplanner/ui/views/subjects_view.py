import flet as ft

from studyplanner.domain.logic.grading import format_average, recent_grades
from studyplanner.domain.models.entities import Subject
from studyplanner.services.subjects_service import SubjectsService
from studyplanner.services.validation import InputError
from studyplanner.state.app_state import AppState


STATUS_COLORS = {
    "Excellent": (ft.Colors.GREEN_100, ft.Colors.GREEN_800),
    "Good": (ft.Colors.BLUE_100, ft.Colors.BLUE_800),
    "Average": (ft.Colors.YELLOW_100, ft.Colors.YELLOW_800),
    "Needs Improvement": (ft.Colors.RED_100, ft.Colors.RED_800),
}


def subject_color(name: str) -> str:
    return getattr(ft.Colors, f"{name.upper()}_500", ft.Colors.BLUE_500)


def _badge(text: str, bgcolor: str, color: str) -> ft.Container:
    return ft.Container(
        content=ft.Text(text, size=12, color=color),
        bgcolor=bgcolor,
        padding=ft.padding.symmetric(horizontal=8, vertical=2),
        border_radius=10,
    )


def build_subjects_view(page: ft.Page, app_state: AppState, app_bar: ft.AppBar) -> ft.View:
    service = SubjectsService(app_state.storage)

    name = ft.TextField(label="Subject name (e.g., Mathematics)", expand=True)
    status = ft.Text(color=ft.Colors.RED_400)
    grid = ft.Row(wrap=True, spacing=12, run_spacing=12)

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def subject_card(subject: Subject) -> ft.Card:
        avg = service.average(subject)
        label = service.status(subject)
        grade_input = ft.TextField(label="Grade (0-100)", width=150, keyboard_type=ft.KeyboardType.NUMBER)

        def on_add_grade(_):
            try:
                service.add_grade(subject.id, grade_input.value)
                set_status(f"Grade {grade_input.value.strip()} added successfully!", is_error=False)
                render_subjects()
            except InputError as exc:
                set_status(str(exc))
                page.update()

        def on_remove(_):
            service.remove_subject(subject.id)
            set_status("Subject has been deleted", is_error=False)
            render_subjects()

        grade_input.on_submit = on_add_grade

        summary = [
            ft.Text(format_average(avg), size=24, weight=ft.FontWeight.BOLD, color=ft.Colors.INDIGO_600),
            ft.Text("Average Grade", color=ft.Colors.GREY_700),
        ]
        if label is not None:
            bg, fg = STATUS_COLORS[label]
            summary.append(_badge(label, bg, fg))

        body = [
            ft.Row(
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                controls=[
                    ft.Row(
                        controls=[
                            ft.Container(
                                content=ft.Icon(ft.Icons.MENU_BOOK, color=ft.Colors.WHITE),
                                bgcolor=subject_color(subject.color),
                                padding=8,
                                border_radius=8,
                            ),
                            ft.Text(subject.name, size=18, weight=ft.FontWeight.BOLD),
                        ]
                    ),
                    ft.IconButton(icon=ft.Icons.REMOVE, icon_color=ft.Colors.RED_400, on_click=on_remove),
                ],
            ),
            ft.Container(
                bgcolor=ft.Colors.GREY_50,
                border_radius=8,
                padding=12,
                content=ft.Column(controls=summary, horizontal_alignment=ft.CrossAxisAlignment.CENTER),
            ),
        ]
        if subject.grades:
            body.append(ft.Text("Recent Grades:", weight=ft.FontWeight.W_500))
            body.append(
                ft.Row(
                    wrap=True,
                    controls=[_badge(f"{g:g}", ft.Colors.GREY_200, ft.Colors.GREY_900) for g in recent_grades(subject.grades)],
                )
            )
        body.append(ft.Row(controls=[grade_input, ft.ElevatedButton("Add", on_click=on_add_grade)]))

        return ft.Card(content=ft.Container(width=320, padding=12, content=ft.Column(controls=body)))

    def fill_grid() -> None:
        grid.controls.clear()
        if not service.subjects:
            grid.controls.append(
                ft.Column(
                    controls=[
                        ft.Text("No subjects yet", size=18, weight=ft.FontWeight.BOLD),
                        ft.Text("Add your first subject to start tracking your academic progress!"),
                    ]
                )
            )
        for subject in service.subjects:
            grid.controls.append(subject_card(subject))

    def render_subjects() -> None:
        fill_grid()
        page.update()

    def on_add(_):
        try:
            subject = service.add_subject(name.value)
            name.value = ""
            set_status(f"{subject.name} has been added!", is_error=False)
            render_subjects()
        except InputError as exc:
            set_status(str(exc))
            page.update()

    name.on_submit = on_add

    view = ft.View(
        route="/subjects",
        controls=[
            app_bar,
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("Academic Subjects", size=26, weight=ft.FontWeight.BOLD),
                        ft.Text("Track your subjects and monitor your academic progress"),
                        ft.Text("Add New Subject", size=20, weight=ft.FontWeight.BOLD),
                        ft.Row(controls=[name, ft.ElevatedButton("Add Subject", icon=ft.Icons.ADD, on_click=on_add)]),
                        status,
                        ft.Divider(),
                        grid,
                    ],
                ),
            ),
        ],
    )
    fill_grid()
    return view
