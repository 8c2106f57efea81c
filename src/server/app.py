"""FastAPI server exposing HTTP endpoints to summarize an uploaded meeting
transcript with a generative language model and to e-mail the result.

Run with:
uvicorn server.app:create_app --factory --host 0.0.0.0 --port 5000
or:
python -m server

POST /generate-summary
Content-Type: multipart/form-data
    transcript: <file>.txt (max 5 MB)
    prompt: "Summarize in one sentence"
-> 200 {"summary": "..."}

POST /send-email
Content-Type: application/json
{
    "summary": "Budget approved.",
    "recipients": "a@x.com, b@y.com"
}
-> 200 {"message": "Email sent successfully"}

Every failure is answered as {"error": "<message>"}.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from intake import UploadError, read_transcript, staged_upload
from mailer import MailAuthError, MailClient, parse_recipients
from server.config import ServiceConfig
from summary import RateLimitExceeded, SummaryClient, build_prompt

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Meeting Summary"

# ---------------------------------------------------------------------------
## Pydantic models
# ---------------------------------------------------------------------------
## Request fields are optional so that absent values get the handler's own
# 400 messages rather than a generic validation error.


class SendEmailRequest(BaseModel):
    summary: Optional[str] = Field(None, description="Summary text used as the message body")
    recipients: Optional[str] = Field(None, description="Comma-separated recipient addresses")


class SummaryResponse(BaseModel):
    summary: str


class EmailResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad Request"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
}


# ---------------------------------------------------------------------------
# Injected collaborators
# ---------------------------------------------------------------------------
def get_config(request: Request) -> ServiceConfig:
    return request.app.state.config


def get_summary_client(request: Request) -> SummaryClient:
    return request.app.state.summary_client


def get_mail_client(request: Request) -> MailClient:
    return request.app.state.mail_client


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post(
    "/generate-summary",
    response_model=SummaryResponse,
    responses={**ERROR_RESPONSES, 429: {"model": ErrorResponse, "description": "AI rate limit exceeded"}},
)
async def generate_summary(
    transcript: Optional[UploadFile] = File(None),
    prompt: Optional[str] = Form(None),
    config: ServiceConfig = Depends(get_config),
    summary_client: SummaryClient = Depends(get_summary_client),
) -> SummaryResponse:
    logger.info(f"Summary requested for {transcript.filename if transcript else None}")
    try:
        async with staged_upload(transcript, config.upload_dir, config.max_upload_bytes) as path:
            text = await read_transcript(path)

            instruction = (prompt or "").strip()
            if not instruction:
                raise HTTPException(status_code=400, detail="Missing prompt")

            summary = await summary_client.generate(build_prompt(instruction, text))
    except HTTPException as exc:
        logger.warning(f"Summary request rejected: {exc.detail}")
        raise
    except UploadError as exc:
        logger.warning(f"Transcript upload rejected: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
    except RateLimitExceeded:
        logger.warning("Generative API rate limit hit")
        raise HTTPException(status_code=429, detail="AI rate limit exceeded. Try later.")
    except Exception:
        logger.exception("Summary error")
        raise HTTPException(status_code=500, detail="Failed to generate summary. Check logs.")

    return SummaryResponse(summary=summary)


@router.post(
    "/send-email",
    response_model=EmailResponse,
    responses={**ERROR_RESPONSES, 401: {"model": ErrorResponse, "description": "Invalid email credentials"}},
)
async def send_email(
    request: SendEmailRequest,
    mail_client: MailClient = Depends(get_mail_client),
) -> EmailResponse:
    summary = request.summary or ""
    if not summary.strip():
        raise HTTPException(status_code=400, detail="Missing or empty summary")
    recipients = request.recipients or ""
    if not recipients.strip():
        raise HTTPException(status_code=400, detail="Missing recipients")

    recipient_list = parse_recipients(recipients)
    if not recipient_list:
        raise HTTPException(status_code=400, detail="No valid email addresses provided")

    try:
        await mail_client.send(recipients=recipient_list, subject=EMAIL_SUBJECT, body=summary)
    except MailAuthError:
        raise HTTPException(status_code=401, detail="Invalid email credentials")
    except Exception:
        logger.exception("Email error")
        raise HTTPException(status_code=500, detail="Failed to send email. Check logs.")

    logger.info(f"Summary e-mailed to {len(recipient_list)} recipient(s)")
    return EmailResponse(message="Email sent successfully")


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------
def create_app(
    config: Optional[ServiceConfig] = None,
    summary_client: Optional[SummaryClient] = None,
    mail_client: Optional[MailClient] = None,
) -> FastAPI:
    """Build the application; collaborators default to clients built from config."""
    config = config or ServiceConfig.from_env()
    logging.basicConfig(level=config.log_level)

    Path(config.upload_dir).mkdir(parents=True, exist_ok=True)

    app = FastAPI(title="Meeting Summary API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.summary_client = summary_client or SummaryClient(
        api_key=config.gemini_api_key,
        model=config.gemini_model,
        base_url=config.gemini_base_url,
    )
    app.state.mail_client = mail_client or MailClient(
        username=config.email_user,
        password=config.email_pass,
        host=config.smtp_host,
        port=config.smtp_port,
    )

    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    logger.info(f"Upload directory: {config.upload_dir}, model: {config.gemini_model}")
    return app
