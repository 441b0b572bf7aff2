"""
ngx-admin E2E Tests Package.

Real-browser scenarios for the ngx_e2e page objects. They need a running
ngx-admin instance and are skipped when it cannot be reached.

Test Modules:
    - test_use_page_objects: Navigation, Form Layouts and datepicker tests
    - test_ui_components: Smart Table tests

Running Tests:
    # Run all E2E tests
    pytest tests/e2e/

    # Run against another instance with a visible browser
    E2E_BASE_URL=http://localhost:4300 E2E_HEADLESS=false pytest tests/e2e/

    # Run in Firefox with slow motion
    E2E_BROWSER=firefox E2E_SLOW_MO=500 pytest tests/e2e/

Environment Variables:
    E2E_BASE_URL (or QA_URL, BASE_URL): Application URL
        (default: http://127.0.0.1:4200)
    E2E_BROWSER: chromium, firefox or webkit (default: chromium)
    E2E_HEADLESS: Run in headless mode (default: true)
    E2E_SLOW_MO: Slow motion delay in ms (default: 0)
    E2E_DEFAULT_TIMEOUT: Playwright action timeout in ms (default: 30000)
    E2E_TIMEOUTS__SECTION_CONFIRM_MS: Section confirmation bound in ms
    E2E_CONFIG_FILE: TOML file with an [e2e] table
"""
