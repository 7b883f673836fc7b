import logging
from contextlib import asynccontextmanager
from typing import Any, List

from fastapi import Body, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog import find_exam_by_code, list_exams, seed_default_exam
from database import SessionLocal, engine, get_db, init_db, table_names
from errors import ExamPortalError, InvalidInput, NotFound, StoreError
from evaluator import evaluate
from ledger import append_result, list_results
from schemas import Exam, ExamResult, ExamSummary, Submission
from settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed the catalog before any request is served."""
    settings.validate()
    init_db()
    db = SessionLocal()
    try:
        seed_default_exam(db)
    finally:
        db.close()
    logger.info("Exam Portal API startup complete")
    yield


app = FastAPI(
    title="Exam Portal API",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error payloads
@app.exception_handler(ExamPortalError)
async def exam_portal_error_handler(request: Request, exc: ExamPortalError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=InvalidInput.status_code, content={"error": InvalidInput.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=StoreError.status_code, content={"error": StoreError.message})


def parse_submission(payload: Any) -> Submission:
    if not isinstance(payload, dict):
        raise InvalidInput()
    try:
        submission = Submission.model_validate(payload)
    except ValidationError as e:
        raise InvalidInput() from e
    if not submission.student_name.strip():
        raise InvalidInput()
    return submission


@app.get("/")
def read_root():
    return {"status": "Exam Portal API running", "db": engine.dialect.name}


@app.get("/api/exams", response_model=List[ExamSummary])
def get_exams(db: Session = Depends(get_db)):
    return list_exams(db)


@app.get("/api/exams/{code}", response_model=Exam)
def get_exam(code: str, db: Session = Depends(get_db)):
    exam = find_exam_by_code(db, code)
    if exam is None:
        raise NotFound()
    return exam


@app.post("/api/exams/{code}/submit", response_model=ExamResult)
def submit_exam(code: str, payload: Any = Body(None), db: Session = Depends(get_db)):
    exam = find_exam_by_code(db, code)
    if exam is None:
        raise NotFound()
    submission = parse_submission(payload)
    result = evaluate(exam, submission)
    append_result(db, result)
    logger.info(
        "Scored attempt on %s: %d/%d (%.2f%%, passed=%s)",
        result.exam_code, result.score, result.total_marks, result.percentage, result.passed,
    )
    return result


@app.get("/api/admin/exams/{code}/attempts", response_model=List[ExamResult])
def get_attempts(code: str, key: str = Query(""), db: Session = Depends(get_db)):
    return list_results(db, code, key, settings.ADMIN_KEY)


@app.get("/test")
def test_database():
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_url": None,
        "database_dialect": engine.dialect.name,
        "connection_status": "Not Connected",
        "tables": []
    }
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        response["connection_status"] = "Connected"
        response["database"] = "✅ Connected"
        try:
            response["tables"] = table_names()[:10]
            response["database"] = "✅ Connected & Working"
        except SQLAlchemyError as e:
            response["database"] = f"⚠️  Connected but Error: {str(e)[:50]}"
    except SQLAlchemyError as e:
        response["database"] = f"❌ Error: {str(e)[:50]}"

    response["database_url"] = "✅ Set" if settings.DATABASE_URL else "❌ Not Set"
    return response


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
