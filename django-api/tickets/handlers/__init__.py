from tickets.handlers.views import TicketPurchaseView

__all__ = ["TicketPurchaseView"]
