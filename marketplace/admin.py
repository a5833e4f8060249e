from django.contrib import admin

from .models import Category, Product, Purchase, PurchaseItem, SellerPaymentDetail, StoredFile


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "product_count", "created_at")
    search_fields = ("name",)
    readonly_fields = ("created_at",)

    def product_count(self, obj):
        return obj.products.count()

    product_count.short_description = "Products"


@admin.register(StoredFile)
class StoredFileAdmin(admin.ModelAdmin):
    list_display = ("id", "file_uri", "file_thumbnail_uri", "created_at")
    search_fields = ("file_uri",)
    readonly_fields = ("created_at",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "sku", "seller", "category", "price", "stock_quantity", "updated_at")
    list_filter = ("category", "created_at")
    search_fields = ("name", "sku", "seller__username")
    readonly_fields = ("created_at", "updated_at")
    list_select_related = ("seller", "category")


class PurchaseItemInline(admin.TabularInline):
    model = PurchaseItem
    extra = 0
    fields = ("product", "seller", "product_name", "product_sku", "quantity", "unit_price", "total")
    readonly_fields = fields
    can_delete = False


class SellerPaymentDetailInline(admin.TabularInline):
    model = SellerPaymentDetail
    extra = 0
    fields = ("seller", "proof_file", "created_at")
    readonly_fields = fields
    can_delete = False


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    list_display = ("id", "sender_name", "sender_contact_type", "total_amount", "is_paid", "paid_at", "created_at")
    list_filter = ("is_paid", "sender_contact_type", "created_at")
    search_fields = ("sender_name", "sender_contact_detail")
    readonly_fields = ("total_amount", "is_paid", "paid_at", "created_at", "updated_at")
    inlines = [PurchaseItemInline, SellerPaymentDetailInline]

    fieldsets = (
        ("Sender", {"fields": ("sender_name", "sender_contact_type", "sender_contact_detail")}),
        ("Payment", {"fields": ("total_amount", "is_paid", "paid_at")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )
