"""
Scan Services

Organized by responsibility, in the order a scan runs through them:

1. scraping/ - Page retrieval
   - fetcher.py: PageFetcher, single httpx GET with timeout, redirect cap and User-Agent

2. extraction/ - Parsing
   - document.py: ParsedDocument query facade and JsonLdBlock type normalization

3. analysis/ - Grading
   - checks.py: the five AEO checks and the CHECKS registry
   - scoring.py: overall score and letter grade
   - recommendations.py: ranked, capped recommendation list

4. scan/ - Orchestration
   - scan.py: ScanService (validate -> fetch -> parse -> grade) and fetch error classification
"""
