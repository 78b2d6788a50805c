# config/urls.py

from django.apps import apps as django_apps
from django.urls import path, include

from apps.board.views import HealthView

urlpatterns = [
    # Board (estado em JSON)
    path('board/', include('apps.board.urls')),

    # Monitoramento
    path('health/', HealthView.as_view(engine=django_apps.get_app_config('board').engine), name='health'),
]
