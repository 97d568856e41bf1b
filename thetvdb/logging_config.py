"""
Logging de la CLI thetvdb via loguru.

La console suit les options -v/-q : messages courts par defaut, detail
module:fonction:ligne en mode verbeux. Le fichier JSON, lorsqu'il est
configure, recoit toujours les evenements DEBUG du client (requetes,
logins) ; ni la cle API ni le jeton n'y figurent.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

SHORT_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
VERBOSE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def console_level(default: str = "INFO", verbose: int = 0, quiet: bool = False) -> str:
    """
    Niveau console resultant des options de la ligne de commande.

    -q l'emporte sur -v ; -v passe en DEBUG, -vv en TRACE.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default.upper()


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru.

    Args :
        log_level : Niveau minimum pour la console, voir console_level()
        log_file : Fichier de log JSON, None pour ne rien ecrire sur disque
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    logger.remove()

    verbose = log_level in ("DEBUG", "TRACE")
    logger.add(
        sys.stderr,
        level=log_level,
        format=VERBOSE_FORMAT if verbose else SHORT_FORMAT,
        colorize=True,
        backtrace=verbose,
        diagnose=False,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        filter="thetvdb",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
