"""
AWS Lambda handler for the CV matching API using Mangum.
"""

import logging

from mangum import Mangum

from cvmatch.main import app

logger = logging.getLogger()
logger.setLevel(logging.INFO)

handler = Mangum(app, lifespan="off")


def lambda_handler(event, context):
    """
    AWS Lambda entry point.

    Parameters
    ----------
    event : dict
        API Gateway event object containing the HTTP request details
    context : LambdaContext
        AWS Lambda context object with runtime information

    Returns
    -------
    dict
        API Gateway-compatible response with statusCode, headers, and body
    """
    logger.info("Received event: %s", event.get("requestContext", {}).get("requestId", "unknown"))
    return handler(event, context)
