from django.db import models

from orders.models import OrderStatus


class Order(models.Model):
    """
    A delivery order between two points.
    origin, destination and distance are written once at creation;
    status is the only column the update path touches.
    """
    # canonical "lat,lng" strings
    origin = models.TextField()
    destination = models.TextField()

    # driving distance in meters, from the routing provider
    distance = models.PositiveIntegerField()

    status = models.TextField(
        choices=[(status.value, status.value.title()) for status in OrderStatus],
        default=OrderStatus.UNASSIGNED.value,
    )

    class Meta:
        db_table = "orders"
        ordering = ["id"]

    def __str__(self):
        return f"Order #{self.id} - {self.status}"
