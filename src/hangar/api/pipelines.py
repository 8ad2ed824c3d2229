"""
Pipeline configuration API.
"""

from typing import Any, Dict, Optional, Tuple

from hangar.constants import CONFIG_VERSION_HEADER, PIPELINE_CONFIG_PATH
from hangar.utils.url import path_segment
from .client import ApiClient, ApiError


class PipelineClient(ApiClient):
    """Pipeline configuration endpoints for the target's team"""

    def _config_path(self, pipeline: str) -> str:
        return PIPELINE_CONFIG_PATH.format(
            team=path_segment(self.target.team_name),
            pipeline=path_segment(pipeline),
        )

    def get_config(self, pipeline: str) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        """
        Fetch the current pipeline configuration.

        Returns:
            Tuple of (config, version), both None when the pipeline does not exist
        """
        try:
            response = self.make_http_request(self._config_path(pipeline))
        except ApiError as e:
            if e.status_code == 404:
                self.logger.debug(f"Pipeline '{pipeline}' does not exist yet")
                return None, None
            raise

        body = response.json() if response.content else {}
        config = body.get("config") if isinstance(body, dict) else None
        return config, response.headers.get(CONFIG_VERSION_HEADER)

    def save_config(self, pipeline: str, version: Optional[str], config: Dict[str, Any]) -> bool:
        """
        Save a pipeline configuration.

        Returns:
            True if the pipeline was created, False if it was updated
        """
        headers = {}
        if version:
            headers[CONFIG_VERSION_HEADER] = version

        response = self.make_http_request(
            self._config_path(pipeline),
            method="PUT",
            json_body=config,
            headers=headers,
        )
        return response.status_code == 201
