from django.urls import path

from theater.handlers import StatementView

urlpatterns = [
    path("statements", StatementView.as_view(), name="statement-create"),
]
