import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from greeter.services.greeting import GreetingHandler

router = APIRouter()


def get_greeting_handler() -> GreetingHandler:
    return GreetingHandler(logging.getLogger("greeter.routers.greet"))


@router.get("/greet", response_class=PlainTextResponse)
async def greet_user(
    name: Optional[str] = Query(None, description="要问候的名字"),
    handler: GreetingHandler = Depends(get_greeting_handler),
):
    """接收查询参数 name 并返回纯文本问候语。缺少 name 时按 None 交给 handler 处理。"""
    return handler.handle(name)
