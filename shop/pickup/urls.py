"""URLs для приложения pickup."""

from django.urls import path

from .views import pickup_list, select_pickup

app_name = "pickup"

urlpatterns = [
    path("list/", pickup_list, name="list_default"),
    path("list/<str:method>/", pickup_list, name="list"),
    path("select/<str:method>/", select_pickup, name="select"),
]
