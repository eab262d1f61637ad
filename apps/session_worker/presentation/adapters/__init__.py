from apps.session_worker.presentation.adapters.consumer_adapter import ConsumerAdapter

__all__ = ["ConsumerAdapter"]
