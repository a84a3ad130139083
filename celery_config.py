# 📄 File: celery_config.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration file for our background task system (Celery) that regularly re-checks every plant's
# care schedule so owners hear about watering and feeding chores when they fall due.
#
# 🧪 Purpose (Technical Summary):
# Celery configuration for reminder evaluation: Redis broker/backend from application settings,
# queue routing, beat schedule and environment-specific overrides.
#
# 🔗 Dependencies:
# - celery Python package (redis transport)
# - Redis server (message broker)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app/background_jobs/tasks/care_reminders.py
# - Docker Compose services (celery worker, celery beat)

from datetime import timedelta

from celery import Celery
from kombu import Queue

from app.shared.config.settings import get_settings

settings = get_settings()

REMINDER_TASK = "app.background_jobs.tasks.care_reminders.evaluate_care_reminders"
REMINDER_FANOUT_TASK = "app.background_jobs.tasks.care_reminders.evaluate_all_care_reminders"

# =============================================================================
# CELERY CONFIGURATION CLASS
# =============================================================================


class CeleryConfig:
    """
    Celery configuration class for Plant Care Application.

    Defines settings for task execution, routing and scheduling.
    """

    # =========================================================================
    # BROKER AND BACKEND SETTINGS
    # =========================================================================

    broker_url = settings.CELERY_BROKER_URL
    result_backend = settings.CELERY_RESULT_BACKEND

    broker_connection_retry_on_startup = True
    broker_connection_max_retries = 10
    broker_pool_limit = 10

    result_expires = timedelta(hours=24)

    # =========================================================================
    # TASK SETTINGS
    # =========================================================================

    task_serializer = "json"
    result_serializer = "json"
    accept_content = ["json"]
    timezone = "UTC"
    enable_utc = True

    task_default_queue = "default"

    task_time_limit = 300  # 5 minutes hard limit
    task_soft_time_limit = 240
    task_acks_late = True
    worker_prefetch_multiplier = 1

    # Reminder evaluation errors are per-operation and never retried
    task_reject_on_worker_lost = True
    task_ignore_result = False

    # =========================================================================
    # QUEUE DEFINITIONS
    # =========================================================================

    task_routes = {
        REMINDER_FANOUT_TASK: {"queue": "medium_priority"},
        REMINDER_TASK: {"queue": "care_reminders"},
    }

    task_queues = (
        Queue("medium_priority", routing_key="medium_priority"),
        Queue("care_reminders", routing_key="care_reminders"),
        Queue("default", routing_key="default"),
    )

    # =========================================================================
    # WORKER SETTINGS
    # =========================================================================

    worker_max_tasks_per_child = 1000
    worker_hijack_root_logger = False
    worker_log_format = "[%(asctime)s: %(levelname)s/%(processName)s] %(message)s"
    worker_task_log_format = "[%(asctime)s: %(levelname)s/%(processName)s][%(task_name)s(%(task_id)s)] %(message)s"

    # =========================================================================
    # BEAT SCHEDULER SETTINGS
    # =========================================================================

    beat_schedule = {
        "evaluate-care-reminders": {
            "task": REMINDER_FANOUT_TASK,
            "schedule": timedelta(minutes=settings.REMINDER_EVALUATION_INTERVAL_MINUTES),
            "options": {"queue": "medium_priority"},
        },
    }

    beat_scheduler = "celery.beat:PersistentScheduler"
    beat_schedule_filename = "celerybeat-schedule"

    # =========================================================================
    # MONITORING
    # =========================================================================

    task_send_sent_event = True
    task_track_started = True
    worker_send_task_events = True


# =============================================================================
# ENVIRONMENT-SPECIFIC CONFIGURATIONS
# =============================================================================

class DevelopmentCeleryConfig(CeleryConfig):
    """Development-specific Celery configuration."""

    worker_log_level = "DEBUG"
    beat_schedule = {
        "evaluate-care-reminders": {
            **CeleryConfig.beat_schedule["evaluate-care-reminders"],
            "schedule": timedelta(minutes=5),
        },
    }


class TestCeleryConfig(CeleryConfig):
    """Run tasks inline without a broker."""

    broker_url = "memory://"
    result_backend = "cache+memory://"
    task_always_eager = True
    task_eager_propagates = True


class ProductionCeleryConfig(CeleryConfig):
    """Production-specific Celery configuration."""

    worker_log_level = "INFO"
    worker_max_tasks_per_child = 5000
    broker_use_ssl = True
    redis_backend_use_ssl = True


# =============================================================================
# CONFIG FACTORY
# =============================================================================

def get_celery_config() -> CeleryConfig:
    """
    Factory function to get appropriate Celery configuration based on environment.

    Returns:
        CeleryConfig: Configuration instance for current environment
    """
    config_map = {
        "development": DevelopmentCeleryConfig,
        "test": TestCeleryConfig,
        "staging": ProductionCeleryConfig,
        "production": ProductionCeleryConfig,
    }

    config_class = config_map.get(settings.ENVIRONMENT, DevelopmentCeleryConfig)
    return config_class()


# =============================================================================
# CELERY APPLICATION INSTANCE
# =============================================================================

app = Celery("plant_care_backend")
app.config_from_object(get_celery_config())
app.autodiscover_tasks(["app.background_jobs"])


if __name__ == "__main__":
    app.start()
