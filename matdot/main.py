from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import HealthResponse, ProductResponse
from .multiply import multiply_csv_bytes
from .errors import MatrixError

app = FastAPI(
    title="matdot",
    description="Integer matrix products from CSV uploads",
    version="0.1.0",
)


def _require_csv(file: UploadFile) -> None:
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/product", response_model=ProductResponse)
async def multiply_csv(a: UploadFile = File(...), b: UploadFile = File(...)):
    _require_csv(a)
    _require_csv(b)

    raw_a = await a.read()
    raw_b = await b.read()
    try:
        return multiply_csv_bytes(raw_a, raw_b)
    except MatrixError as e:
        raise HTTPException(status_code=422, detail=error_detail(e)) from e


def error_detail(e: MatrixError) -> dict:
    detail = {"issue": e.issue, "operand": e.operand, "message": str(e)}
    detail.update(e.details)
    return detail
