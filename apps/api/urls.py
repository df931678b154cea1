from django.urls import path
from . import views

app_name = "api"

urlpatterns = [
    # v1
    path("v1/state", views.state, name="state"),
    path("v1/power", views.power, name="power"),
    path("v1/mode", views.mode, name="mode"),
    path("v1/temperature", views.temperature, name="temperature"),
    path("v1/fan_speed", views.fan_speed, name="fan-speed"),
]
