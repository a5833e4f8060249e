from django.contrib import admin

from .models import SellerProfile


@admin.register(SellerProfile)
class SellerProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "bank_account_name", "bank_account_holder", "bank_account_number", "updated_at")
    search_fields = ("user__username", "user__email", "bank_account_holder")
    readonly_fields = ("created_at", "updated_at")
