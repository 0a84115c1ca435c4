"""
FastAPI service for the UPI SMS Transaction Parser
RESTful endpoints for classifying and parsing inbound payment SMS
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
from pathlib import Path
from datetime import datetime
import itertools
import logging
import sys

# Add backend to path
backend_path = Path(__file__).parent.parent / 'backend'
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

# Import backend modules
from config import config
from logging_config import setup_logging
from extractors.signals import is_transaction
from extractors.sms_parser import TransactionDetails, parse
from pipeline import MessageProcessor, SAMPLE_MESSAGES

setup_logging()
logger = logging.getLogger(__name__)


class ClassifyRequest(BaseModel):
    """Inbound SMS to classify"""

    sender: str = Field(..., description="Sender id the SMS claims as its origin")
    body: str = Field(..., description="Message text")


class ParseRequest(BaseModel):
    """SMS body to parse"""

    body: str = Field(..., description="Message text")


class TransactionModel(BaseModel):
    """Transaction details extracted from SMS"""

    amount: float
    merchant: str
    amount_display: str


class ClassifyResponse(BaseModel):
    is_transaction: bool


class ParseResponse(BaseModel):
    parsed: bool
    transaction: Optional[TransactionModel] = None


class ProcessResponse(BaseModel):
    """Result of processing an SMS"""

    status: str
    message: str
    entry_id: Optional[int] = None
    transaction: Optional[TransactionModel] = None
    errors: List[str] = []


class SampleResult(BaseModel):
    sender: str
    body: str
    is_transaction: bool
    transaction: Optional[TransactionModel] = None


class PendingEntryStore:
    """In-memory stand-in for the ledger; hands out ids without keeping entries."""

    def __init__(self):
        self._ids = itertools.count(1)

    def __call__(self, details: TransactionDetails, status: str) -> int:
        entry_id = next(self._ids)
        logger.info(f"Recorded {status} entry {entry_id}: {details!r}")
        return entry_id


# Initialize FastAPI app
app = FastAPI(
    title="UPI SMS Transaction Parser API",
    description="Classify payment SMS and extract amount and merchant",
    version=config.VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

entry_store = PendingEntryStore()
processor = MessageProcessor(store=entry_store)


def _transaction_model(details: Optional[TransactionDetails]) -> Optional[TransactionModel]:
    if details is None:
        return None
    return TransactionModel(**details.to_dict())


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "message": config.APP_NAME,
        "version": config.VERSION,
        "config": config.to_dict(),
        "endpoints": {
            "POST /classify": "Check whether an SMS is a payment transaction",
            "POST /parse": "Extract amount and merchant from an SMS body",
            "POST /messages": "Classify, parse and record an SMS as a pending entry",
            "GET /samples": "Parse results for the built-in sample messages",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


@app.post("/classify", response_model=ClassifyResponse)
async def classify_message(request: ClassifyRequest):
    """
    Classify an SMS.

    - **sender**: Sender id, e.g. "VK-UPI"
    - **body**: Message text
    """
    return ClassifyResponse(is_transaction=is_transaction(request.sender, request.body))


@app.post("/parse", response_model=ParseResponse)
async def parse_message(request: ParseRequest):
    """
    Parse amount and merchant from an SMS body.

    Does not check the sender; call /classify first if needed.
    """
    details = parse(request.body)
    return ParseResponse(parsed=details is not None, transaction=_transaction_model(details))


@app.post("/messages", response_model=ProcessResponse)
async def process_message(request: ClassifyRequest):
    """
    Run an SMS through the full pipeline and record it as a pending entry.

    - **sender**: Sender id, e.g. "PHONEPE"
    - **body**: Message text
    """
    try:
        result = processor.process(request.sender, request.body)
    except Exception as e:
        logger.error(f"Error processing message: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return ProcessResponse(
        status=result.status.value,
        message=result.message,
        entry_id=result.entry_id,
        transaction=_transaction_model(result.details),
        errors=result.errors
    )


@app.get("/samples", response_model=List[SampleResult])
async def list_samples():
    """Parse results for the built-in sample messages"""
    samples = []
    for sender, body in SAMPLE_MESSAGES:
        accepted = is_transaction(sender, body)
        details = parse(body) if accepted else None
        samples.append(SampleResult(
            sender=sender,
            body=body,
            is_transaction=accepted,
            transaction=_transaction_model(details)
        ))
    return samples


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
