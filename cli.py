#!/usr/bin/env python3
"""Terminal front end: a numbered menu over the todo list service."""
import sys

from config import LOG_LEVEL, TODO_DATA_FILE
from logging_setup import get_logger, setup_logging
from storage import open_store
from todos import TodoList, ValidationError

logger = get_logger(__name__)

MENU = """
Add your work to remember.
1: Add a task.
2: View Your task.
3: Exit."""


def show_tasks(todo_list: TodoList, out) -> None:
    print("\nYour Todo List.", file=out)
    for n, task in enumerate(todo_list.list(), 1):
        print(f"{n}. {task}", file=out)


def run(todo_list: TodoList, input_fn=input, out=None) -> int:
    out = out or sys.stdout
    while True:
        print(MENU, file=out)
        try:
            option = input_fn("Choose an option: ").strip()
            if option == "1":
                text = input_fn("\nEnter your task: ")
                try:
                    added = todo_list.add(text)
                except ValidationError as e:
                    print(e, file=out)
                    continue
                print(f"Task Added: {added.todos[added.position - 1]}", file=out)
            elif option == "2":
                show_tasks(todo_list, out)
            elif option == "3":
                print("Good Bye You have a good day.", file=out)
                return 0
            else:
                print("\nInvalid Option", file=out)
        except (EOFError, KeyboardInterrupt):
            logger.debug("input closed, leaving menu")
            print("\nGood Bye You have a good day.", file=out)
            return 0


def main() -> int:
    setup_logging(LOG_LEVEL)
    return run(TodoList(open_store(TODO_DATA_FILE)))


if __name__ == "__main__":
    sys.exit(main())
