# emojicopypaster/app/core/views.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django_ratelimit.exceptions import Ratelimited
import json

from catalog.models import Emoji
from seo.models import EmojiPage
from .models import SiteSetting

import logging
logger = logging.getLogger(__name__)


def staff_required(view_func):
    """ Decorator to ensure the user is logged in AND is a staff member. """
    @login_required
    def _wrapped_view(request, *args, **kwargs):
        if not request.user.is_staff:
            return JsonResponse({'success': False, 'error': 'You do not have permission to access this page.'}, status=403)
        return view_func(request, *args, **kwargs)
    return _wrapped_view


def request_data(request):
    """
    Returns the request payload as a dict, supporting both a JSON body and
    standard form data.
    """
    if request.content_type == 'application/json':
        if not request.body:
            return {}
        data = json.loads(request.body)
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object.")
        return data
    return request.POST


def handler403(request, exception=None):
    if isinstance(exception, Ratelimited):
        logger.warning(f"Rate limit exceeded for {request.path}: {exception}")
        return JsonResponse({
            'success': False,
            'error': 'You have exceeded the request limit. Please wait a while and try again.'
        }, status=403)

    logger.error(f"Permission denied (403) for request to {request.path}")
    return JsonResponse({'success': False, 'error': 'Permission denied.'}, status=403)


@staff_required
def manage_dashboard(request):
    """
    Summary numbers for the admin dashboard. The page list and the batch
    generation progress are loaded by the dashboard through the seo APIs.
    """
    site = SiteSetting.load()
    total_pages = EmojiPage.objects.count()
    generated_pages = EmojiPage.objects.filter(is_generated=True).count()

    data = {
        'site_name': site.site_name,
        'site_url': site.site_url,
        'emoji_count': Emoji.objects.count(),
        'category_count': len(Emoji.objects.categories()),
        'page_count': total_pages,
        'generated_count': generated_pages,
        'pending_count': total_pages - generated_pages,
    }
    logger.info(f"[manage_dashboard] {data}")
    return JsonResponse(data)
