"""カスタム例外クラスおよびFastAPI例外ハンドラ登録。

アプリケーション全体で使用するドメイン固有の例外階層と、
FastAPIアプリケーションへのハンドラ登録関数を提供する。
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 基底例外
# ---------------------------------------------------------------------------

class AppException(Exception):
    """アプリケーション基底例外。

    Attributes:
        status_code: HTTPステータスコード。
        detail: エラー詳細メッセージ。
    """

    def __init__(
        self,
        status_code: int = 500,
        detail: str = "Internal server error",
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


# ---------------------------------------------------------------------------
# リクエスト
# ---------------------------------------------------------------------------

class RateLimitExceededError(AppException):
    """リクエスト過多エラー (429 Too Many Requests)。"""

    def __init__(
        self,
        detail: str = "Too many requests. Please try again later.",
    ) -> None:
        super().__init__(status_code=429, detail=detail)


# ---------------------------------------------------------------------------
# リソース
# ---------------------------------------------------------------------------

class NotFoundError(AppException):
    """リソース未検出エラー (404 Not Found)。"""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=404, detail=detail)


class CatalogError(AppException):
    """カタログデータ読み込みエラー (500)。"""

    def __init__(self, detail: str = "Failed to load catalog data") -> None:
        super().__init__(status_code=500, detail=detail)


# ---------------------------------------------------------------------------
# ドメイン
# ---------------------------------------------------------------------------

class InvalidMonthError(ValueError):
    """1〜12の範囲外、または整数でない月番号。"""

    def __init__(self, month: object) -> None:
        self.month = month
        super().__init__(f"Invalid month number: {month!r}")


# ---------------------------------------------------------------------------
# FastAPI例外ハンドラ登録
# ---------------------------------------------------------------------------

def register_exception_handlers(app: FastAPI) -> None:
    """FastAPIアプリケーションにカスタム例外ハンドラを登録する。

    Args:
        app: FastAPIアプリケーションインスタンス。
    """

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> JSONResponse:
        """AppException系例外をJSON形式でレスポンスする。"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    @app.exception_handler(InvalidMonthError)
    async def invalid_month_handler(
        request: Request,
        exc: InvalidMonthError,
    ) -> JSONResponse:
        """不正な月番号を422として返す。"""
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """未処理例外をキャッチし500レスポンスを返す。"""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )
