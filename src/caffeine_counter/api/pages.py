"""Static entry page served at the site root."""

INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Caffeine Counter</title>
    <script src="https://accounts.google.com/gsi/client" async defer></script>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
      #app { display: none; }
    </style>
  </head>
  <body>
    <h1>Caffeine Counter</h1>
    <div id="login" class="row">
      <div id="g_id_onload" data-callback="handleCredentialResponse"></div>
      <div class="g_id_signin" data-type="standard"></div>
    </div>
    <div id="app">
      <div class="row" id="user"></div>
      <div class="row">
        <button onclick="loadEndpoint('/api/total-today')">Today</button>
        <button onclick="loadEndpoint('/api/total-all')">All time</button>
        <button onclick="loadEndpoint('/api/types')">Drinks</button>
        <button onclick="loadEndpoint('/api/entries')">Entries</button>
        <button onclick="loadEndpoint('/api/leaderboard?period=week')">Leaderboard</button>
        <button onclick="loadEndpoint('/api/caffeine-chart?period=week')">Chart</button>
        <button onclick="signOut()">Sign out</button>
      </div>
      <pre id="output">Ready.</pre>
    </div>
    <script>
      async function checkAuthStatus() {
        const res = await fetch('/api/auth/check', { credentials: 'include' });
        if (res.ok) {
          showApp(await res.json());
        }
      }
      function showApp(user) {
        document.getElementById('login').style.display = 'none';
        document.getElementById('app').style.display = 'block';
        document.getElementById('user').textContent = 'Signed in as ' + user.name;
      }
      async function handleCredentialResponse(response) {
        const res = await fetch('/api/auth/google', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          credentials: 'include',
          body: JSON.stringify({ token: response.credential })
        });
        const data = await res.json();
        if (data.success) {
          showApp(data.user);
        }
      }
      async function signOut() {
        await fetch('/api/auth/logout', { method: 'POST', credentials: 'include' });
        window.location.reload();
      }
      async function loadEndpoint(path) {
        const output = document.getElementById('output');
        output.textContent = 'Loading...';
        const res = await fetch(path, { credentials: 'include' });
        const data = await res.json();
        output.textContent = res.ok
          ? JSON.stringify(data, null, 2)
          : 'Error: ' + (data.error || res.status);
      }
      checkAuthStatus();
    </script>
  </body>
</html>
"""


def render_index(google_client_id: str) -> str:
    """Return the entry page wired to the Google client id."""
    return INDEX_HTML.replace(
        'data-callback="handleCredentialResponse"',
        f'data-client_id="{google_client_id}" data-callback="handleCredentialResponse"',
    )
