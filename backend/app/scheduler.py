"""
Planificateur APScheduler pour la purge des sessions expirées.

Les sessions expirées sont déjà ignorées à la lecture ; ce job périodique
libère simplement les entrées que plus aucune requête ne consultera.
"""

import logging
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from app.storage.base import Storage

logger = logging.getLogger(__name__)

scheduler: Optional[BackgroundScheduler] = None


def _purge_expired_sessions(storage: Storage) -> None:
    """Tâche planifiée : supprime les sessions arrivées à expiration."""
    try:
        purged = storage.sessions.purge_expired()
    except Exception as exc:
        logger.error("Erreur lors de la purge des sessions expirées : %s", exc)
        return
    if purged:
        logger.info("%d session(s) expirée(s) supprimée(s).", purged)


def start_scheduler(storage: Storage, interval_hours: int) -> None:
    """Démarre le planificateur en arrière-plan (appelé au démarrage de l'API)."""
    global scheduler
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        _purge_expired_sessions,
        trigger="interval",
        hours=interval_hours,
        args=[storage],
        id="purge_expired_sessions",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler démarré : purge des sessions toutes les %d h.", interval_hours)


def stop_scheduler() -> None:
    """Arrête le planificateur proprement (appelé à l'arrêt de l'API)."""
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler arrêté.")
