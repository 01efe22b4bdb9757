from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path

from gridwork.apps.core.views import HomeView, healthz
from gridwork.apps.logs import views as log_views
from gridwork.apps.reservations import views as reservation_views
from gridwork.apps.tickets import views as ticket_views

urlpatterns = [
    #
    # Dashboard and health check
    #
    path("", HomeView.as_view(), name="home"),
    path("healthz", healthz, name="healthz"),
    #
    # Django admin
    #
    path("admin/", admin.site.urls),
    #
    # Authentication
    #
    path(
        "login/",
        auth_views.LoginView.as_view(template_name="registration/login.html"),
        name="login",
    ),
    path("logout/", auth_views.LogoutView.as_view(), name="logout"),
    #
    # Reservations
    #
    path(
        "reservations/",
        reservation_views.ReservationListView.as_view(),
        name="reservation-list",
    ),
    path(
        "reservations/entries/",
        reservation_views.ReservationEntriesView.as_view(),
        name="reservation-list-entries",
    ),
    path(
        "reservations/new/",
        reservation_views.ReservationCreateView.as_view(),
        name="reservation-create",
    ),
    path(
        "reservations/<int:pk>/",
        reservation_views.ReservationDetailView.as_view(),
        name="reservation-detail",
    ),
    path(
        "reservations/<int:pk>/edit/",
        reservation_views.ReservationUpdateView.as_view(),
        name="reservation-edit",
    ),
    path(
        "reservations/<int:pk>/delete/",
        reservation_views.ReservationDeleteView.as_view(),
        name="reservation-delete",
    ),
    #
    # Tickets
    #
    path("tickets/", ticket_views.TicketListView.as_view(), name="ticket-list"),
    path(
        "tickets/entries/",
        ticket_views.TicketEntriesView.as_view(),
        name="ticket-list-entries",
    ),
    path("tickets/new/", ticket_views.TicketCreateView.as_view(), name="ticket-create"),
    path("tickets/<int:pk>/", ticket_views.TicketDetailView.as_view(), name="ticket-detail"),
    path("tickets/<int:pk>/edit/", ticket_views.TicketUpdateView.as_view(), name="ticket-edit"),
    path(
        "tickets/<int:pk>/delete/",
        ticket_views.TicketDeleteView.as_view(),
        name="ticket-delete",
    ),
    #
    # Activity logs
    #
    path("logs/", log_views.LogListView.as_view(), name="log-list"),
    path("logs/entries/", log_views.LogEntriesView.as_view(), name="log-list-entries"),
    path("logs/new/", log_views.LogCreateView.as_view(), name="log-create"),
    path("logs/<int:pk>/", log_views.LogDetailView.as_view(), name="log-detail"),
    path("logs/<int:pk>/edit/", log_views.LogUpdateView.as_view(), name="log-edit"),
    path("logs/<int:pk>/delete/", log_views.LogDeleteView.as_view(), name="log-delete"),
]
