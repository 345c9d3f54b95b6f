from django.urls import path

from tickets.handlers import TicketPurchaseView

urlpatterns = [
    path(
        "accounts/<str:account_id>/purchases",
        TicketPurchaseView.as_view(),
        name="ticket-purchase",
    ),
]
