"""Serializers for the JSON API.

Input: ContactSubmissionSerializer validates a submission the same way the
HTML form does. Output: domain models and page state to API responses.
"""

from rest_framework import serializers

from band.domain import ContactSubmission, EventType, MusicStyle, PageState, SubmissionFeedback


class ContactSubmissionSerializer(serializers.Serializer):
    """Validates a contact submission posted to the API."""

    name = serializers.CharField(max_length=200)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=40, required=False, allow_blank=True, default="")
    event_type = serializers.ChoiceField(choices=EventType.choices())
    event_date = serializers.DateField()
    event_location = serializers.CharField(max_length=200)
    music_styles = serializers.MultipleChoiceField(choices=MusicStyle.choices(), required=False, default=set)
    message = serializers.CharField(required=False, allow_blank=True, default="")

    def to_submission(self) -> ContactSubmission:
        data = self.validated_data
        return ContactSubmission(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            event_type=EventType.from_code(data["event_type"]),
            event_date=data["event_date"],
            event_location=data["event_location"],
            music_styles=frozenset(MusicStyle.from_code(code) for code in data["music_styles"]),
            message=data["message"],
        )


class FeedbackSerializer(serializers.Serializer):
    message = serializers.CharField()
    kind = serializers.SerializerMethodField()

    def get_kind(self, obj: SubmissionFeedback) -> str:
        return obj.kind.value or "none"


class PageStateSerializer(serializers.Serializer):
    """Serializer for the PageState snapshot.

    Expects ``clears_in`` (seconds until the pending clear) in the context.
    """

    menu_open = serializers.BooleanField(source="navigation.is_open")
    feedback = FeedbackSerializer()
    clears_in = serializers.SerializerMethodField()

    def get_clears_in(self, obj: PageState) -> float:
        return self.context.get("clears_in", 0.0)


class MemberSerializer(serializers.Serializer):
    img_src = serializers.CharField()
    name = serializers.CharField()
    role = serializers.CharField()
    description = serializers.CharField()


class SongSerializer(serializers.Serializer):
    title = serializers.CharField()
    description = serializers.CharField()
    audio_src = serializers.CharField()
    spotify_link = serializers.CharField()


class VideoSerializer(serializers.Serializer):
    youtube_embed_url = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()


class ServiceSerializer(serializers.Serializer):
    icon = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    features = serializers.ListField(child=serializers.CharField())


class SocialLinkSerializer(serializers.Serializer):
    href = serializers.CharField()
    icon_src = serializers.CharField()
    alt = serializers.CharField()


class ContactDetailsSerializer(serializers.Serializer):
    intro_text = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    social_links = SocialLinkSerializer(many=True)


class SiteContentSerializer(serializers.Serializer):
    """Serializer for the SiteContent domain model."""

    band_name = serializers.CharField()
    hero_subtitle = serializers.CharField()
    about_description = serializers.CharField()
    members = MemberSerializer(many=True)
    songs = SongSerializer(many=True)
    videos = VideoSerializer(many=True)
    services = ServiceSerializer(many=True)
    contact = ContactDetailsSerializer()
