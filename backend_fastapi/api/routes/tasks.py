from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    require_available_store,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    CreateTaskRequest,
    MessageResponse,
    TaskCreatedResponse,
    UpdateTaskRequest,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import Task, validate_task_name

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_available_store)],
)


@router.post(
    "",
    response_model=TaskCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    body: CreateTaskRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskCreatedResponse:
    """
    Crea una nueva tarea (siempre pendiente).

    - **taskName**: Nombre de la tarea, obligatorio.
    - **taskDescription**: Descripción opcional.
    - **dueDate**: Fecha límite opcional (ISO, `YYYY-MM-DD`).
    """
    validate_task_name(body.task_name)
    task = use_case.execute(
        CreateTaskCommand(
            task_name=body.task_name,
            task_description=body.task_description,
            due_date=body.due_date,
        )
    )
    return TaskCreatedResponse(
        message="Task created successfully", task_id=task.id, task=task
    )


@router.get(
    "",
    response_model=list[Task],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[Task]:
    """
    Obtiene todas las tareas, de la más reciente a la más antigua.
    """
    return use_case.execute()


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Obtener una tarea",
)
def get_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> Task:
    return use_case.execute(task_id)


@router.put(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Editar una tarea existente",
)
def update_task(
    task_id: int,
    body: UpdateTaskRequest,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> MessageResponse:
    """
    Actualiza solo los campos enviados; el resto conserva su valor.

    - **task_id**: Id de la tarea a modificar.
    - **taskName**, **taskDescription**, **dueDate**, **completed**: opcionales.
    """
    use_case.execute(UpdateTaskCommand(id=task_id, changes=body.to_changes()))
    return MessageResponse(message="Task updated successfully")


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> MessageResponse:
    """
    Elimina una tarea del sistema.

    - **task_id**: Id de la tarea a eliminar.
    """
    use_case.execute(DeleteTaskCommand(id=task_id))
    return MessageResponse(message="Task deleted successfully")
