# app.py
# DEPENDENCIES
import os
import sys
import time
import uuid
import signal
import uvicorn
from typing import Any
from typing import List
from typing import Dict
from pathlib import Path
from fastapi import File
from fastapi import Form
from fastapi import FastAPI
from fastapi import Request
from typing import Optional
from datetime import datetime
from pydantic import BaseModel
from fastapi import UploadFile
from fastapi import HTTPException
from fastapi.responses import Response
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from utils.logger import log_info
from utils.logger import log_error
from config.risk_rules import RiskRules
from config.settings import settings
from utils.validators import ContractValidator
from utils.text_processor import TextProcessor
from utils.logger import ContractAnalyzerLogger
from utils.document_reader import DocumentReader
from config.clause_catalog import CatalogError
from config.clause_catalog import SEVERITY_STYLES
from utils.document_reader import DocumentReadError
from config.clause_catalog import BC_RENTAL_CLAUSES
from config.clause_catalog import get_category_label
from config.clause_catalog import load_clause_catalog
from reporter.pdf_generator import generate_pdf_report
from services.contract_analyzer import ContractAnalyzer


# PYDANTIC SCHEMAS
class HealthResponse(BaseModel):
    status       : str
    version      : str
    timestamp    : str
    catalog_size : int


class AnalysisResponse(BaseModel):
    analysis_id        : str
    timestamp          : str
    summary            : str
    key_details        : List[Dict[str, Any]]
    flagged_clauses    : List[Dict[str, Any]]
    overall_risk_score : int
    risk_level         : str
    recommendations    : List[str]
    metadata           : Dict[str, Any]


class ErrorResponse(BaseModel):
    error     : str
    detail    : str
    timestamp : str


class FileValidationResponse(BaseModel):
    valid      : bool
    message    : str
    confidence : Optional[float]          = None
    report     : Optional[Dict[str, Any]] = None


# ANALYSIS SERVICE
class AnalysisService:
    """
    Shared analyzer and reader for the API
    """
    def __init__(self, catalog_path: Optional[Path] = None):
        self.catalog  = self._load_catalog(catalog_path)
        self.analyzer = ContractAnalyzer(catalog = self.catalog)
        self.reader   = DocumentReader()


    @staticmethod
    def _load_catalog(catalog_path: Optional[Path]):
        if not catalog_path:
            return BC_RENTAL_CLAUSES

        catalog = load_clause_catalog(catalog_path)
        log_info("Clause catalog loaded from file", path = str(catalog_path), entries = len(catalog))

        return catalog


    def analyze_contract(self, contract_text: str) -> Dict[str, Any]:
        """
        Run the analysis and build the API response payload
        """
        result     = self.analyzer.analyze(text = contract_text)
        payload    = result.to_dict()
        statistics = TextProcessor.get_text_statistics(contract_text)

        payload.update({"analysis_id" : str(uuid.uuid4()),
                        "timestamp"   : datetime.now().isoformat(),
                        "risk_level"  : RiskRules.get_risk_level(result.overall_risk_score),
                        "metadata"    : {"char_count"          : statistics["char_count"],
                                         "word_count"          : statistics["word_count"],
                                         "flagged_count"       : len(result.flagged_clauses),
                                         "malicious_count"     : len(result.malicious_clauses),
                                         "informational_count" : len(result.informational_clauses),
                                         "key_detail_count"    : len(result.key_details),
                                        },
                       })

        return payload


analysis_service : Optional[AnalysisService] = None


ContractAnalyzerLogger.setup(log_dir  = str(settings.LOG_DIR),
                             app_name = settings.APP_LOG_NAME,
                             level    = getattr(ContractAnalyzerLogger, settings.LOG_LEVEL.upper(), ContractAnalyzerLogger.INFO),
                            )


@asynccontextmanager
async def lifespan(app: FastAPI):
    global analysis_service
    log_info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting up")

    try:
        analysis_service = AnalysisService(catalog_path = settings.CLAUSE_CATALOG_PATH)

    except CatalogError as e:
        log_error(e, context = {"operation" : "startup"})
        raise

    log_info("Analyzer ready", host = settings.HOST, port = settings.PORT, catalog_size = len(analysis_service.catalog))

    try:
        yield

    finally:
        analysis_service = None
        log_info("Server shutdown complete")


# Define the application
app = FastAPI(title       = settings.APP_NAME,
              version     = settings.APP_VERSION,
              description = "Clause matching and risk scoring for BC residential rental contracts",
              docs_url    = "/api/docs",
              redoc_url   = "/api/redoc",
              lifespan    = lifespan,
             )

# CORS middleware
app.add_middleware(CORSMiddleware,
                   allow_origins     = settings.CORS_ORIGINS,
                   allow_credentials = settings.CORS_ALLOW_CREDENTIALS,
                   allow_methods     = settings.CORS_ALLOW_METHODS,
                   allow_headers     = settings.CORS_ALLOW_HEADERS,
                  )


# HELPER FUNCTIONS
def get_service() -> AnalysisService:
    if not analysis_service:
        raise HTTPException(status_code = 503,
                            detail      = "Service not initialized",
                           )

    return analysis_service


def validate_file(file: UploadFile) -> tuple[bool, str]:
    file_extension = os.path.splitext(file.filename or "")[1].lower()

    if file_extension not in settings.ALLOWED_EXTENSIONS:
        return False, f"Invalid file type. Allowed: {', '.join(settings.ALLOWED_EXTENSIONS)}"

    file.file.seek(0, 2)
    size = file.file.tell()

    file.file.seek(0)

    if (size > settings.MAX_UPLOAD_SIZE):
        return False, f"File too large. Max size: {settings.MAX_UPLOAD_SIZE / (1024*1024):.1f}MB"

    if (size == 0):
        return False, "File is empty"

    return True, "OK"


def read_contract_file(service: AnalysisService, file: UploadFile) -> str:
    """
    Read contract file and return text content
    """
    file_extension = Path(file.filename or "").suffix.lower()

    return service.reader.read_file(file.file, file_extension)


def validate_contract_text(text: str) -> tuple[bool, str]:
    is_valid, _, message = ContractValidator.is_valid_contract(text, min_length = settings.MIN_CONTRACT_LENGTH)

    if is_valid and (len(text) > settings.MAX_CONTRACT_LENGTH):
        return False, f"Contract text too long. Maximum {settings.MAX_CONTRACT_LENGTH} characters allowed."

    return is_valid, message


# API ROUTES
@app.get(f"{settings.API_PREFIX}/health", response_model = HealthResponse)
async def health_check():
    service = get_service()

    return HealthResponse(status       = "healthy",
                          version      = settings.APP_VERSION,
                          timestamp    = datetime.now().isoformat(),
                          catalog_size = len(service.catalog),
                         )


@app.get(f"{settings.API_PREFIX}/clauses")
async def get_clause_catalog():
    service = get_service()

    clauses = list()

    for clause in service.catalog:
        entry                   = clause.to_dict()
        entry["category_label"] = get_category_label(clause.category)
        entry["severity_style"] = SEVERITY_STYLES.get(clause.severity)
        clauses.append(entry)

    return {"total"   : len(clauses),
            "clauses" : clauses,
           }


@app.post(f"{settings.API_PREFIX}/analyze/file", response_model = AnalysisResponse)
async def analyze_contract_file(file: UploadFile = File(...)):
    service = get_service()

    try:
        is_valid, message = validate_file(file)

        if not is_valid:
            raise HTTPException(status_code = 400,
                                detail      = message,
                               )

        contract_text               = read_contract_file(service, file)

        is_valid_text, text_message = validate_contract_text(contract_text)

        if not is_valid_text:
            raise HTTPException(status_code = 400,
                                detail      = text_message,
                               )

        result = service.analyze_contract(contract_text)

        log_info("File analysis completed",
                 filename    = file.filename,
                 analysis_id = result["analysis_id"],
                 risk_score  = result["overall_risk_score"],
                )

        return AnalysisResponse(**result)

    except HTTPException:
        raise

    except DocumentReadError as e:
        log_error(e, context = {"operation" : "read_file", "filename" : file.filename})

        raise HTTPException(status_code = 400,
                            detail      = str(e),
                           )

    except Exception as e:
        log_error(e, context = {"operation" : "analyze_file", "filename" : file.filename})

        raise HTTPException(status_code = 500,
                            detail      = f"Analysis failed: {repr(e)}",
                           )


@app.post(f"{settings.API_PREFIX}/analyze/text", response_model = AnalysisResponse)
async def analyze_contract_text(contract_text: str = Form(..., description = "Contract text to analyze")):
    service = get_service()

    try:
        is_valid, message = validate_contract_text(contract_text)

        if not is_valid:
            raise HTTPException(status_code = 400,
                                detail      = message,
                               )

        result = service.analyze_contract(contract_text)

        log_info("Text analysis completed",
                 analysis_id = result["analysis_id"],
                 risk_score  = result["overall_risk_score"],
                )

        return AnalysisResponse(**result)

    except HTTPException:
        raise

    except Exception as e:
        log_error(e, context = {"operation" : "analyze_text"})

        raise HTTPException(status_code = 500,
                            detail      = f"Analysis failed: {repr(e)}",
                           )


@app.post(f"{settings.API_PREFIX}/validate/text", response_model = FileValidationResponse)
async def validate_contract_text_endpoint(contract_text: str = Form(...)):
    is_valid, message = validate_contract_text(contract_text)

    if not is_valid:
        return FileValidationResponse(valid   = False,
                                      message = message,
                                     )

    report = ContractValidator.get_validation_report(contract_text)

    return FileValidationResponse(valid      = True,
                                  message    = "Contract appears to be a tenancy agreement" if (report["scores"]["total"] >= 30) else "Text accepted, but it may not be a rental contract",
                                  confidence = report["scores"]["total"],
                                  report     = report,
                                 )


@app.post(f"{settings.API_PREFIX}/generate-pdf")
async def generate_pdf_from_analysis(analysis_result: Dict[str, Any]):
    try:
        pdf_buffer  = generate_pdf_report(analysis_result = analysis_result)
        analysis_id = analysis_result.get('analysis_id', 'report')

        return Response(content    = pdf_buffer.getvalue(),
                        media_type = "application/pdf",
                        headers    = {"Content-Disposition": f"attachment; filename=rental_analysis_{analysis_id}.pdf"}
                       )

    except Exception as e:
        log_error(e, context = {"operation" : "generate_pdf"})

        raise HTTPException(status_code = 500,
                            detail      = f"Failed to generate PDF: {repr(e)}",
                           )


# ERROR HANDLERS AND MIDDLEWARE
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(status_code = exc.status_code,
                        content     = ErrorResponse(error     = str(exc.detail),
                                                    detail    = str(exc.detail),
                                                    timestamp = datetime.now().isoformat(),
                                                   ).model_dump()
                       )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    log_error(exc, context = {"path" : request.url.path})

    return JSONResponse(status_code = 500,
                        content     = ErrorResponse(error     = "Internal server error",
                                                    detail    = str(exc),
                                                    timestamp = datetime.now().isoformat(),
                                                   ).model_dump()
                       )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time   = time.time()
    response     = await call_next(request)
    process_time = time.time() - start_time

    log_info(f"API Request: {request.method} {request.url.path} - Status: {response.status_code} - Duration: {process_time:.3f}s")

    return response



# MAIN
def main():
    def signal_handler(sig, frame):
        print("\nReceived Ctrl+C, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    try:
        uvicorn.run("app:app",
                    host      = settings.HOST,
                    port      = settings.PORT,
                    reload    = settings.RELOAD,
                    workers   = settings.WORKERS,
                    log_level = settings.LOG_LEVEL.lower(),
                   )

    except Exception as e:
        log_error(e, context = {"operation" : "server"})

        sys.exit(1)


if __name__ == "__main__":
    main()
