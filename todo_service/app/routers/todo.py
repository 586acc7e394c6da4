from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello World"

router = APIRouter()


@router.head("/todo", response_class=PlainTextResponse, include_in_schema=False)
@router.get("/todo", response_class=PlainTextResponse, summary="Respuesta fija")
def get_todo() -> str:
    return GREETING
