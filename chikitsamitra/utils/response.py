from typing import Any
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi import status


class APIResponse:
    @staticmethod
    def success(data: Any, message: str = "Success", status_code: int = status.HTTP_200_OK):
        return JSONResponse(
            status_code=status_code,
            content={
                "success": True,
                "message": message,
                "data": jsonable_encoder(data),
                "error": None
            }
        )

    @staticmethod
    def created(data: Any, message: str = "Resource created successfully"):
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={
                "success": True,
                "message": message,
                "data": jsonable_encoder(data),
                "error": None
            }
        )
