from fastapi import APIRouter, Depends, HTTPException

from inventory.api.deps import get_service
from inventory.api.state import InventoryService
from inventory.logic.voice.capture import InvalidTransition
from inventory.utilities.constants import EXAMPLE_PHRASES
from inventory.utilities.validators import CaptureEventInput, VoiceCommandInput

router = APIRouter()


@router.post('/api/voice/command')
def voice_command(payload: VoiceCommandInput, service: InventoryService = Depends(get_service)):
    return service.process(payload.transcript).to_dict()


@router.post('/api/voice/events')
def voice_event(payload: CaptureEventInput, service: InventoryService = Depends(get_service)):
    if payload.event == 'result' and not (payload.transcript or '').strip():
        raise HTTPException(status_code=422, detail='A result event needs a transcript')
    try:
        return service.handle_capture_event(payload)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get('/api/voice/state')
def voice_state(service: InventoryService = Depends(get_service)):
    return service.capture.to_dict()


@router.get('/api/examples')
def examples():
    return {'examples': list(EXAMPLE_PHRASES)}
