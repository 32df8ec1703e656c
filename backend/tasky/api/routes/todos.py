from fastapi import APIRouter, Depends

from tasky.api.deps import get_todo_service, read_todo_body, require_session
from tasky.models import Todo
from tasky.schemas.todo import TodoCreated, TodoDeleted, TodosCleared, TodoUpdated
from tasky.services.todo_service import TodoService

# router dependencies run before the endpoint's own, so a rejected caller
# never reaches the body or the store
router = APIRouter(tags=["todos"], dependencies=[Depends(require_session)])


@router.get("/todo/{todo_id}")
def get_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    return service.fetch_one(todo_id).to_wire()


@router.get("/todos/{userid}")
def list_todos(userid: str, service: TodoService = Depends(get_todo_service)):
    return [todo.to_wire() for todo in service.fetch_all_for_user(userid)]


@router.post("/todo/{userid}", response_model=TodoCreated, status_code=201)
def create_todo(
    userid: str,
    data: Todo = Depends(read_todo_body),
    service: TodoService = Depends(get_todo_service),
):
    return TodoCreated(id=service.create(userid, data))


@router.put("/todo", response_model=TodoUpdated)
@router.patch("/todo", response_model=TodoUpdated)
def update_todo(
    data: Todo = Depends(read_todo_body),
    service: TodoService = Depends(get_todo_service),
):
    matched, modified = service.update(data)
    return TodoUpdated(matched_count=matched, modified_count=modified)


@router.delete("/todo/{userid}/{todo_id}", response_model=TodoDeleted)
def delete_todo(userid: str, todo_id: str, service: TodoService = Depends(get_todo_service)):
    return TodoDeleted(deleted_count=service.delete_one(todo_id, userid))


@router.delete("/todos/{userid}", response_model=TodosCleared)
def clear_todos(userid: str, service: TodoService = Depends(get_todo_service)):
    return TodosCleared(deleted_count=service.delete_all_for_user(userid))
