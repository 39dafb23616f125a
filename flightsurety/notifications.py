"""
Slack notification for finished deployments
"""

import logging
from datetime import datetime
from typing import Optional

import aiohttp

from flightsurety.deployment_config import ConfigurationRecord

logger = logging.getLogger(__name__)

NOTIFY_TIMEOUT = 10


def build_payload(record: ConfigurationRecord) -> dict:
    return {
        "text": "🚀 FlightSurety contracts deployed",
        "attachments": [
            {
                "color": "good",
                "fields": [
                    {"title": "Network", "value": f"{record.network} ({record.url})", "short": False},
                    {"title": "Data contract", "value": f"`{record.data_address}`", "short": False},
                    {"title": "App contract", "value": f"`{record.app_address}`", "short": False},
                    {
                        "title": "Time",
                        "value": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                        "short": True
                    }
                ]
            }
        ]
    }


async def send_deployment_notification(webhook_url: Optional[str], record: ConfigurationRecord,
                                       timeout: Optional[float] = None) -> bool:
    """Post the deployed addresses to Slack. Returns True if Slack accepted the message.

    Never raises: the deployment has already succeeded when this runs.
    """
    if not webhook_url:
        return False

    total = timeout if timeout is not None else NOTIFY_TIMEOUT
    try:
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=total)) as session:
            async with session.post(webhook_url, json=build_payload(record)) as response:
                if response.status == 200:
                    logger.info("Slack notification sent successfully")
                    return True
                logger.error(f"Failed to send Slack notification: {response.status}")
    except Exception as e:
        logger.error(f"Error sending Slack notification: {e}")
    return False
