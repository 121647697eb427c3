from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from linsys import (
    Matrix,
    analyze_system,
    get_general_solution,
    get_parametric_form,
    get_solution_set_type,
    is_echelon_form,
    is_reduced_echelon_form,
)
from linsys.errors import LinsysError
from linsys.settings import get_settings

app = FastAPI(title="linsys API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Number = Union[int, float]


class MatrixRequest(BaseModel):
    matrix: list[list[Number]]
    mode: Optional[str] = None


class StepInfo(BaseModel):
    description: str
    expression: str
    explanation: str
    step_number: int


class Summary(BaseModel):
    runtime_ms: float
    total_steps: int
    verification_steps: int
    validation_status: str
    timestamp: str
    library: str


class AnalyzeResponse(BaseModel):
    equation: str
    solution_type: Optional[str]
    is_echelon_form: bool
    is_reduced_echelon_form: bool
    general_solution: list[str]
    parametric_form: list[str]
    steps: list[StepInfo]
    final_answer: str
    verification_steps: list[StepInfo]
    summary: Summary


class SolutionResponse(BaseModel):
    solution_type: str
    is_echelon_form: bool
    is_reduced_echelon_form: bool
    general_solution: list[str]
    parametric_form: list[str]


def _build_matrix(req: MatrixRequest) -> Matrix:
    if not req.matrix or not req.matrix[0]:
        raise HTTPException(status_code=400, detail="Matrix cannot be empty.")
    return Matrix.from_rows(req.matrix)


@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze(req: MatrixRequest):
    settings = get_settings()
    mode = req.mode or settings["compute_mode"]
    try:
        matrix = _build_matrix(req)
        result = analyze_system(matrix, compute_mode=mode,
                                decimal_places=settings["decimal_places"])
    except (LinsysError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result


@app.post("/api/solution", response_model=SolutionResponse)
def solution(req: MatrixRequest):
    settings = get_settings()
    mode = req.mode or settings["compute_mode"]
    try:
        matrix = _build_matrix(req)
        general = get_general_solution(matrix, compute_mode=mode,
                                       decimal_places=settings["decimal_places"])
        parametric = get_parametric_form(matrix, compute_mode=mode,
                                         decimal_places=settings["decimal_places"])
        solution_type = get_solution_set_type(matrix)
    except (LinsysError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return {
        "solution_type": solution_type.value,
        "is_echelon_form": is_echelon_form(matrix),
        "is_reduced_echelon_form": is_reduced_echelon_form(matrix),
        "general_solution": general,
        "parametric_form": parametric,
    }
