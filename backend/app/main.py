from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from recognizer.engine import classify_equation

app = FastAPI(title="Equation Recognizer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EquationRequest(BaseModel):
    equation: str


class ClassifyResponse(BaseModel):
    equation: str
    tokens: list[str]
    is_equation: bool
    single_variable: bool
    variable: Optional[str] = None
    degree: Optional[int] = None
    degree_name: Optional[str] = None
    message: str


@app.post("/api/classify", response_model=ClassifyResponse)
def classify(req: EquationRequest):
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")

    try:
        result = classify_equation(equation)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Recognizer error: {str(e)}")

    return result
