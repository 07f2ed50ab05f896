from __future__ import annotations
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..core.constants import MAX_CAPACITY, MAX_INPUT_BYTES, OPERATIONS, PROJECT_NAME, PROJECT_VER, Policy
from ..core.encoding import b64d, b64e, transcode
from ..core.errors import MalformedInput, OverflowDetected, TranscodeError
from ..core.validation import validate_bytes_length

class TranscodeReq(BaseModel):
    text: Optional[str] = None
    data_b64: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=0, le=MAX_CAPACITY)
    lenient: bool = True

class TranscodeResp(BaseModel):
    operation: str
    length: int
    output: Optional[str] = None
    output_b64: str

def build_app(logger):
    app = FastAPI(title="safebuf transcoder", version=PROJECT_VER)

    def _error(status_code: int, error: str, **detail):
        return JSONResponse(status_code=status_code, content={"error": error, **detail})

    def _input_bytes(req: TranscodeReq) -> bytes:
        if (req.text is None) == (req.data_b64 is None):
            raise ValueError("Provide exactly one of text or data_b64")
        if req.text is not None:
            data = req.text.encode("utf-8")
        else:
            data = b64d(req.data_b64)
        validate_bytes_length(data, "input", 0, MAX_INPUT_BYTES)
        return data

    @app.get("/health")
    def health():
        return {"status": "ok", "service": PROJECT_NAME, "version": PROJECT_VER}

    @app.post("/transcode/{operation}", response_model=TranscodeResp)
    def transcode_op(operation: str, req: TranscodeReq):
        if operation not in OPERATIONS:
            return _error(404, "unknown operation", operation=operation)
        codec, direction = OPERATIONS[operation]

        try:
            data = _input_bytes(req)
        except MalformedInput:
            return _error(400, "invalid data_b64")
        except ValueError as e:
            return _error(400, str(e))

        kwargs = {}
        if operation == "b64-decode":
            kwargs["policy"] = Policy.SKIP_INVALID if req.lenient else Policy.STRICT

        try:
            out = transcode(codec, direction, data, capacity=req.capacity, logger=logger, **kwargs)
        except OverflowDetected:
            logger.warning("request_rejected", operation=operation, reason="overflow", capacity=req.capacity)
            return _error(413, "overflow", capacity=req.capacity)
        except MalformedInput:
            logger.warning("request_rejected", operation=operation, reason="malformed")
            return _error(400, "malformed")
        except TranscodeError as e:
            return _error(400, e.status)

        try:
            text = out.decode("utf-8")
        except UnicodeDecodeError:
            text = None

        logger.info("transcoded", operation=operation, length=len(out))
        return TranscodeResp(operation=operation, length=len(out), output=text, output_b64=b64e(out))

    return app
