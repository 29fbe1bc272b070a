# --------------------------------------------------
# schemas.py
# --------------------------------------------------
# This file defines the DeploySettings data model,
# the frozen set of values resolved once at startup
# and consumed by the image build and runtime scripts.
#
# Fields map 1:1 to config.ini entries:
#   app.name / app.port / app.debug
#   server.host / server.log_path / server.container_log_path
#   docker.image_name / docker.container_name
# --------------------------------------------------

from pydantic import BaseModel


class DeploySettings(BaseModel):
    """
    Read-only deployment settings.
    Values are produced by ConfigResolver.build_settings().
    """

    app_name: str
    app_port: int
    app_host: str
    app_debug: bool
    app_log_path: str
    container_log_path: str
    docker_image_name: str
    docker_container_name: str

    # Settings are shared process-wide, never mutated
    model_config = {"frozen": True}

    def dump_lines(self):
        """
        Human-readable NAME: value lines in a fixed order.
        Booleans render lower-case (true/false).
        """
        debug = "true" if self.app_debug else "false"
        return [
            f"APP_NAME: {self.app_name}",
            f"APP_PORT: {self.app_port}",
            f"APP_HOST: {self.app_host}",
            f"APP_DEBUG: {debug}",
            f"APP_LOG_PATH: {self.app_log_path}",
            f"CONTAINER_LOG_PATH: {self.container_log_path}",
            f"DOCKER_IMAGE_NAME: {self.docker_image_name}",
            f"DOCKER_CONTAINER_NAME: {self.docker_container_name}",
        ]
