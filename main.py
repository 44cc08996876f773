from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from modules.orders.routes import router as orders_router
from modules.catalog.routes import router as books_router
from modules.catalog.author_routes import router as authors_router
from modules.catalog.category_routes import router as categories_router
from modules.customer.routes import router as customers_router
from utils.log import Logger

logger = Logger(name="main")

app = FastAPI(
    title="Bookstore Order Service",
    description="Orders, stock and catalog backend for the bookstore admin.",
    version="1.0.0",
)

app.include_router(orders_router)
app.include_router(books_router)
app.include_router(authors_router)
app.include_router(categories_router)
app.include_router(customers_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # rejected before any session is opened
    message = "Invalid order data" if request.url.path.startswith("/api/orders") else "Invalid request data"
    logger.info(f"{message} on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message, "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/health", tags=["Health"], response_class=JSONResponse)
def health_check() -> dict:
    return {
        "status": "Bookstore order service is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
