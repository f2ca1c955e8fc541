from datetime import date
import flet as ft

from studyplanner.domain.logic.tasks import FILTER_LABELS, TASK_CATEGORIES, TaskFilter, empty_message, is_overdue
from studyplanner.domain.models.entities import Priority, Task
from studyplanner.services.tasks_service import TasksService
from studyplanner.services.validation import InputError
from studyplanner.state.app_state import AppState


PRIORITY_COLORS = {
    Priority.HIGH: (ft.Colors.RED_100, ft.Colors.RED_800),
    Priority.MEDIUM: (ft.Colors.YELLOW_100, ft.Colors.YELLOW_800),
    Priority.LOW: (ft.Colors.GREEN_100, ft.Colors.GREEN_800),
}


def build_tasks_view(page: ft.Page, app_state: AppState, app_bar: ft.AppBar) -> ft.View:
    service = TasksService(app_state.storage)
    current_filter = {"value": TaskFilter.ALL}

    title = ft.TextField(label="Task title", expand=True)
    description = ft.TextField(label="Description (optional)", expand=True)
    priority = ft.Dropdown(
        width=200,
        label="Priority",
        value=Priority.MEDIUM.value,
        options=[ft.dropdown.Option(p.value, f"{p.value.title()} Priority") for p in Priority],
    )
    category = ft.Dropdown(
        width=200,
        label="Category",
        value="general",
        options=[ft.dropdown.Option(c, c.title()) for c in TASK_CATEGORIES],
    )
    due_date = ft.TextField(label="Due (YYYY-MM-DD)", width=200)
    status = ft.Text(color=ft.Colors.RED_400)
    stats_row = ft.Row(wrap=True, spacing=12)
    filter_row = ft.Row(wrap=True, spacing=8)
    task_list = ft.Column(spacing=8)

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def stat_card(label: str, value: int, color: str) -> ft.Card:
        return ft.Card(
            content=ft.Container(
                width=150,
                padding=12,
                content=ft.Column(
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    controls=[
                        ft.Text(str(value), size=24, weight=ft.FontWeight.BOLD, color=color),
                        ft.Text(label, color=ft.Colors.GREY_700),
                    ],
                ),
            )
        )

    def task_card(task: Task, today: date) -> ft.Card:
        def on_toggle(_):
            service.toggle_task(task.id)
            render_tasks()

        def on_delete(_):
            service.delete_task(task.id)
            set_status("Task has been removed from your list", is_error=False)
            render_tasks()

        bg, fg = PRIORITY_COLORS[task.priority]
        header = [
            ft.Text(
                task.title,
                weight=ft.FontWeight.BOLD,
                color=ft.Colors.GREY_500 if task.completed else None,
                style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH) if task.completed else None,
            ),
            ft.Container(content=ft.Text(task.priority.value, size=12, color=fg), bgcolor=bg, padding=4, border_radius=8),
        ]
        if is_overdue(task, today):
            header.append(ft.Text("Overdue", size=12, color=ft.Colors.RED_600, weight=ft.FontWeight.BOLD))

        details = [ft.Row(controls=header, wrap=True)]
        if task.description:
            details.append(ft.Text(task.description, color=ft.Colors.GREY_700))
        meta = [ft.Text(task.category.title(), size=12, color=ft.Colors.GREY_600)]
        if task.due_date:
            meta.append(ft.Text(f"Due: {task.due_date.isoformat()}", size=12, color=ft.Colors.GREY_600))
        details.append(ft.Row(controls=meta))

        return ft.Card(
            content=ft.Container(
                padding=12,
                content=ft.Row(
                    vertical_alignment=ft.CrossAxisAlignment.START,
                    controls=[
                        ft.Checkbox(value=task.completed, on_change=on_toggle),
                        ft.Column(controls=details, expand=True),
                        ft.IconButton(icon=ft.Icons.DELETE_OUTLINE, icon_color=ft.Colors.RED_400, on_click=on_delete),
                    ],
                ),
            )
        )

    def make_filter_handler(task_filter: TaskFilter):
        def handler(_):
            current_filter["value"] = task_filter
            render_tasks()

        return handler

    def fill() -> None:
        today = date.today()
        counts = service.counts(today)
        stats_row.controls = [
            stat_card("Total Tasks", counts.total, ft.Colors.INDIGO_600),
            stat_card("Completed", counts.completed, ft.Colors.GREEN_600),
            stat_card("Pending", counts.pending, ft.Colors.YELLOW_700),
            stat_card("Overdue", counts.overdue, ft.Colors.RED_600),
        ]

        filter_row.controls = [
            (ft.FilledButton if f is current_filter["value"] else ft.OutlinedButton)(
                FILTER_LABELS[f], on_click=make_filter_handler(f)
            )
            for f in TaskFilter
        ]

        task_list.controls.clear()
        visible = service.filtered(current_filter["value"], today)
        if not visible:
            task_list.controls.append(ft.Text(empty_message(current_filter["value"])))
        for task in visible:
            task_list.controls.append(task_card(task, today))

    def render_tasks() -> None:
        fill()
        page.update()

    def on_add(_):
        try:
            service.add_task(
                title.value,
                description=description.value,
                priority=priority.value,
                category=category.value,
                due_date=due_date.value,
            )
            title.value = ""
            description.value = ""
            priority.value = Priority.MEDIUM.value
            category.value = "general"
            due_date.value = ""
            set_status("Your task has been added successfully!", is_error=False)
            render_tasks()
        except InputError as exc:
            set_status(str(exc))
            page.update()

    fill()

    return ft.View(
        route="/todo",
        controls=[
            app_bar,
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("To-Do List", size=26, weight=ft.FontWeight.BOLD),
                        ft.Text("Stay on top of your assignments and study tasks"),
                        stats_row,
                        ft.Text("Add New Task", size=20, weight=ft.FontWeight.BOLD),
                        ft.Row(controls=[title, description]),
                        ft.Row(controls=[priority, category, due_date]),
                        ft.ElevatedButton("Add Task", icon=ft.Icons.ADD, on_click=on_add),
                        status,
                        ft.Divider(),
                        filter_row,
                        task_list,
                    ],
                ),
            ),
        ],
    )
