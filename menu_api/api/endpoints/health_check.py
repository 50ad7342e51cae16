from fastapi import APIRouter, status
from sqlalchemy import text
from starlette.responses import JSONResponse

from menu_api.api.dependencies import UnitOfWorkDep

router = APIRouter()


@router.get(
    "",
    description="Check server and database connection.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck(unit_of_work: UnitOfWorkDep) -> JSONResponse:
    async with unit_of_work:
        await unit_of_work.session.execute(text("SELECT 1"))

    return JSONResponse(content="Server works!")
