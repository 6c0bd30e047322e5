from django.contrib.auth import views as auth_views
from django.utils.safestring import mark_safe

from .guard import IDLE_QUERY_PARAM, get_session_guard


class IdleLoginView(auth_views.LoginView):
    template_name = "idle_logout/login.html"
    base_message = ""

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        idle = self.request.GET.get(IDLE_QUERY_PARAM)
        # notice is escaped by the guard, base_message is trusted markup
        ctx["login_message"] = mark_safe(get_session_guard().render_login_notice(self.base_message, idle))
        return ctx


class LogoutGetOK(auth_views.LogoutView):
    http_method_names = ['get', 'post', 'options']

    def get(self, request, *args, **kwargs):
        return self.post(request, *args, **kwargs)
