from apps.session_worker.application.common.result import CommandResult, ResultStatus

__all__ = ["CommandResult", "ResultStatus"]
