"""On-screen display panel."""