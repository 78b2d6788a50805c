# apps/board/urls.py

from django.apps import apps as django_apps
from django.urls import path

from . import views

app_name = 'board'


def build_urlpatterns(engine):
    return [
        # Estado atual do board (JSON)
        path('state/', views.BoardStateView.as_view(engine=engine), name='state'),
    ]


urlpatterns = build_urlpatterns(django_apps.get_app_config('board').engine)
