"""HTML reporting for batch scans."""
