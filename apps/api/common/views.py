"""
공통 API 뷰
"""
from django.http import JsonResponse
from django.db import connection


def health_check(request):
    """
    Returns:
        - 200: DB 응답 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as e:
        return JsonResponse({
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }, status=503)

    return JsonResponse({"status": "healthy", "database": "connected"}, status=200)
