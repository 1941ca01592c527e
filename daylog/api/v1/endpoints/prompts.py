# The module is to define the API endpoints for saved prompt templates.
# Date: 2026-10-19
# Version: 0.1.0

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from daylog.api.deps import get_record_store
from daylog.models.api_models import CreatedResponse, PromptWrite
from daylog.models.records import Prompt
from daylog.services.record_store import RecordStore

router = APIRouter()

@router.get("/", response_model=List[Prompt])
async def list_prompts(store: RecordStore = Depends(get_record_store)):
    return await store.list_prompts()

@router.post("/", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_prompt(body: PromptWrite, store: RecordStore = Depends(get_record_store)):
    prompt_id = await store.add_prompt(body.name, body.content)
    return CreatedResponse(id=prompt_id)

@router.put("/{prompt_id}", response_model=Prompt)
async def update_prompt(prompt_id: int, body: PromptWrite, store: RecordStore = Depends(get_record_store)):
    prompt = await store.update_prompt(prompt_id, body.name, body.content)
    if prompt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Prompt {prompt_id} not found.")
    return prompt

@router.delete("/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_prompt(prompt_id: int, store: RecordStore = Depends(get_record_store)):
    if not await store.delete_prompt(prompt_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Prompt {prompt_id} not found.")
