from apps.session_worker.infrastructure.messaging.rabbitmq_client import RabbitMQClient

__all__ = ["RabbitMQClient"]
