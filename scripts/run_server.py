import os
import sys
import logging
import hydra
import uvicorn
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config import ConfigManager
from src.common.logging import setup_logger
from src.cameras.presentation.api import create_app

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    cfg = ConfigManager().merge(cfg)

    level = getattr(logging, str(cfg.log_level).upper(), logging.INFO)
    logger = setup_logger("run_server", level=level)
    # Module loggers are created at import with their own level
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("src."):
            logging.getLogger(name).setLevel(level)
    logger.info("Configuration loaded.")

    app = create_app(cfg)

    server_cfg = cfg.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
