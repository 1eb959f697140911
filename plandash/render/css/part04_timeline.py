# plandash/render/css/part04_timeline.py
from __future__ import annotations

CSS_PART = r'''  .timeline-container {
    background: var(--bg-secondary);
    border-radius: 8px;
    padding: 24px;
  }
  .timeline-container h3 {
    margin-bottom: 24px;
    font-size: 16px;
  }
  .timeline {
    position: relative;
    padding-left: 24px;
  }
  .timeline::before {
    content: "";
    position: absolute;
    left: 6px;
    top: 0;
    bottom: 0;
    width: 2px;
    background: var(--border-color);
  }
  .timeline-item {
    position: relative;
    margin-bottom: 24px;
    padding-left: 24px;
  }
  .timeline-item::before {
    content: "";
    position: absolute;
    left: -21px;
    top: 4px;
    width: 12px;
    height: 12px;
    border-radius: 50%;
    background: var(--bg-tertiary);
    border: 2px solid var(--accent-blue);
  }
  .timeline-item.achieved::before {
    background: var(--accent-green);
    border-color: var(--accent-green);
  }
  .timeline-item.overdue::before {
    background: var(--accent-red);
    border-color: var(--accent-red);
  }
  .timeline-date {
    font-size: 12px;
    color: var(--text-secondary);
    margin-bottom: 4px;
  }
  .timeline-title {
    font-size: 16px;
    font-weight: 600;
    margin-bottom: 4px;
  }
  .timeline-tasks {
    font-size: 13px;
    color: var(--text-secondary);
  }'''
