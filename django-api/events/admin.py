from django.contrib import admin

from events.models import Event, Registration


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    fields = ["name", "email", "phone", "status", "verified", "registered_at"]
    readonly_fields = ["verified", "registered_at"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "local", "date_time", "total_slots", "is_active"]
    list_filter = ["is_active"]
    search_fields = ["title", "local"]
    inlines = [RegistrationInline]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "status", "verified", "registered_at"]
    list_filter = ["status", "verified", "event"]
    search_fields = ["name", "email", "phone"]
    exclude = ["verification_code"]
