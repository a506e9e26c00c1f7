from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from config import TODO_DATA_FILE
from logging_setup import get_logger
from storage import open_store
from todos import NotFoundError, TodoList, ValidationError

STATIC_DIR = Path(__file__).parent / "static"

logger = get_logger(__name__)

app = FastAPI(title="Todo List")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.on_event("startup")
def startup():
    app.state.todo_list = TodoList(open_store(TODO_DATA_FILE))
    logger.info("serving %d tasks (store: %s)", len(app.state.todo_list), TODO_DATA_FILE or "memory")


def get_todo_list(request: Request) -> TodoList:
    return request.app.state.todo_list


TodoListDep = Annotated[TodoList, Depends(get_todo_list)]


class TaskRequest(BaseModel):
    task: str | None = None


@app.exception_handler(ValidationError)
def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(NotFoundError)
def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@app.get("/api/todos")
def list_todos(todo_list: TodoListDep):
    return todo_list.list()


@app.post("/api/todos")
def add_todo(req: TaskRequest, todo_list: TodoListDep):
    added = todo_list.add(req.task)
    return {"message": "Task added successfully", "todos": added.todos}


@app.delete("/api/todos/{index}")
def delete_todo(index: int, todo_list: TodoListDep):
    deleted = todo_list.delete_at(index)
    return {"message": "Task deleted successfully", "deletedTask": deleted.task, "todos": deleted.todos}


@app.get("/")
def root():
    return FileResponse(STATIC_DIR / "index.html")
