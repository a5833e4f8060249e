from django.db import models


class StoredFile(models.Model):
    """
    An uploaded image known to the file store.

    Product media and seller payment proofs both reference rows of this table;
    the upload and thumbnailing pipeline that fills it lives outside this
    service.
    """

    file_uri = models.CharField(max_length=500)
    file_thumbnail_uri = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "marketplace"

    def __str__(self):
        return self.file_uri
