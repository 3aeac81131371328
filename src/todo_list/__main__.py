# src/todo_list/__main__.py

from .cli.main import run

run()
