"""
Lambda handler for the FastAPI application.

Wraps the ASGI app with Mangum so it can run on AWS Lambda behind
API Gateway.
"""
from __future__ import annotations

import logging

from mangum import Mangum

from employee_api.app import app

logger = logging.getLogger(__name__)

# Lifespan events are not delivered on Lambda
handler = Mangum(
    app,
    lifespan="off",
    api_gateway_base_path="",
)

logger.info("Lambda handler initialized")
