from apps.session_worker.application.commands.record_lifecycle import RecordLifecycleCommand

__all__ = ["RecordLifecycleCommand"]
