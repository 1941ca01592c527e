# The module is to define the API endpoints for ideas and completed tasks.
# Date: 2026-10-19
# Version: 0.1.0

from fastapi import APIRouter, Depends, HTTPException, Query, status
from daylog.api.deps import get_record_store
from daylog.models.api_models import CreatedResponse, IdeaCreate, TaskCreate
from daylog.models.records import DailyRecords
from daylog.services.record_store import RecordStore

router = APIRouter()


@router.get("/today", response_model=DailyRecords)
async def get_today_records(store: RecordStore = Depends(get_record_store)):
    """Returns today's ideas and completed tasks."""
    return await store.get_today_records()

@router.get("/range", response_model=DailyRecords)
async def get_records_by_date_range(
    start_date: str = Query(..., pattern=r"^\d{4}-\d{2}-\d{2}$"),
    end_date: str = Query(..., pattern=r"^\d{4}-\d{2}-\d{2}$"),
    store: RecordStore = Depends(get_record_store),
):
    """Returns the ideas and completed tasks of an inclusive date range."""
    try:
        return await store.query_records_by_date_range(start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

@router.post("/ideas", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_idea(body: IdeaCreate, store: RecordStore = Depends(get_record_store)):
    idea_id = await store.add_idea(body.content, body.attachments, body.timestamp)
    return CreatedResponse(id=idea_id)

@router.delete("/ideas/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_idea(idea_id: int, store: RecordStore = Depends(get_record_store)):
    if not await store.delete_idea(idea_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Idea {idea_id} not found.")

@router.post("/tasks", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_done_task(body: TaskCreate, store: RecordStore = Depends(get_record_store)):
    try:
        task_id = await store.add_done_task(body.content, body.start_time, body.end_time, body.attachments, body.timestamp)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return CreatedResponse(id=task_id)

@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_done_task(task_id: int, store: RecordStore = Depends(get_record_store)):
    if not await store.delete_done_task(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task {task_id} not found.")
