import uuid
from django.db import models


class Patient(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    # 唯一索引是并发下的最后一道防线，service 层的预检查只负责快速失败
    email = models.EmailField(unique=True)
    address = models.CharField(max_length=255)
    date_of_birth = models.DateField()
    registered_date = models.DateField()

    class Meta:
        db_table = 'patients'

    def __str__(self):
        return f"{self.name} <{self.email}>"
