from django_filters import rest_framework as filters

from .models import Subscriber


class SubscriberFilter(filters.FilterSet):
    status = filters.ChoiceFilter(choices=Subscriber.STATUS_CHOICES)

    class Meta:
        model = Subscriber
        fields = ["status"]
